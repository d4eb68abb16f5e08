from .fetch_page_blocks import fetch_page_blocks
from .save_page_blocks import save_page_blocks
from .save_single_block import save_single_block
from .delete_page_blocks import delete_page_blocks
