# exceptions.py


class DumpmanError(Exception):
    """Base class for every error dumpman reports to the user."""
    pass


class InvalidRootError(DumpmanError):
    """The root does not contain the expected media directory."""

    def __init__(self, root, path):
        self.root = root
        self.path = path
        super().__init__(
            f"'{root}' is not a valid root ('{path}' does not exist)."
        )


class OutputDirectoryNotFoundError(DumpmanError):
    def __init__(self):
        super().__init__("The output directory does not exist!")


class OutputDirectoryNotEmptyError(DumpmanError):
    def __init__(self):
        super().__init__("The output directory is not empty!")


class NoVideosError(DumpmanError):
    def __init__(self):
        super().__init__("There are no compatible video files in the root folder!")


class StorageError(DumpmanError):
    """An OS-level failure while reading the dump or writing groups."""
    pass


class OpValidationError(DumpmanError):
    """A set of map operations cannot be executed as given."""
    pass


class NoOperationsError(OpValidationError):
    def __init__(self):
        super().__init__("No operations defined! Exiting.")


class OverlappingRangeError(OpValidationError):
    def __init__(self, first, second):
        self.first = first
        self.second = second
        super().__init__(
            f"{first.name} ({first.start}..{first.end}) overlaps "
            f"{second.name} ({second.start}..{second.end})"
        )


class DuplicateGroupError(OpValidationError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"Group '{name}' is defined more than once.")


class ConfigError(DumpmanError):
    """The DUMPMAN_* environment or .env file holds invalid settings."""
    pass
