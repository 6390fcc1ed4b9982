from .packer import pack, pack_and_return_pool, pack_lines, pack_lines_and_return_pool
