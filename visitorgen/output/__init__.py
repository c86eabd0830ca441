from visitorgen.output.writer import package_directory, write_atomically

__all__ = [
    "package_directory",
    "write_atomically",
]
