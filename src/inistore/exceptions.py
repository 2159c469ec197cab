class IniStoreError(Exception):
    pass


class LoadError(IniStoreError):
    """Exception raised when a config file cannot be opened or read.

    Attributes:
        path: The path of the config file.
    """

    path: str

    def __init__(self, path: str):
        super().__init__(f"could not open config file: {path}")

        self.path = path
