from .exceptions import InvariantViolation

def assert_block_payload(block):
    if not isinstance(block, dict):
        raise InvariantViolation("Each block must be a JSON object.")

    block_type = block.get("type")
    if not block_type or not isinstance(block_type, str):
        raise InvariantViolation("Block type is required.")

    content = block.get("content")
    if content is not None and not isinstance(content, (dict, list)):
        raise InvariantViolation(
            f"{block_type} block content must be a JSON object or array."
        )

def block_content(block):
    """The block's content; only a missing value becomes an empty object."""
    content = block.get("content")
    return {} if content is None else content
