def normalize_block(block, admin=False):
    base = {
        "id": block.id,
        "page_path": block.page_path,
        "type": block.type,
        "content": {} if block.content is None else block.content,
        "order_index": block.order_index,
    }

    if admin:
        base["created_at"] = block.created_at.isoformat() if block.created_at else None
        base["updated_at"] = block.updated_at.isoformat() if block.updated_at else None

    return base
