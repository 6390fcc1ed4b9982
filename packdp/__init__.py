from .exceptions import PackerError
