"""Repository browser interface."""

from abc import ABC, abstractmethod

from ..entities import FileDescriptor, FileReturnType, Listing


class RepositoryBrowser(ABC):
    """
    Contract the host file picker relies on.

    Paths are opaque strings owned by the implementation. The capability
    queries default to a read-only repository that needs no login and
    offers no search.
    """

    @abstractmethod
    def list(self, path: str = '', page: str = '') -> Listing:
        """
        List the folders and files at a path.

        Args:
            path: Repository path; empty for the top level
            page: Page token supplied by the host

        Returns:
            Listing with entries and navigation breadcrumbs
        """
        pass

    @abstractmethod
    def resolve_file(self, path: str) -> FileDescriptor:
        """
        Resolve a file path into something the host can fetch.

        Args:
            path: Repository path of the file

        Returns:
            Descriptor with url, filename and size
        """
        pass

    @abstractmethod
    def get_link(self, path: str) -> str:
        """
        Get a persistent link for a file.

        Args:
            path: Repository path of the file

        Returns:
            URL that can be stored as an external reference
        """
        pass

    @abstractmethod
    def get_source_info(self, path: str) -> str:
        """Human readable description of where a file comes from."""
        pass

    def check_login(self) -> bool:
        return True

    def global_search(self) -> bool:
        return False

    def supported_return_types(self) -> FileReturnType:
        return FileReturnType.FILE_INTERNAL | FileReturnType.FILE_EXTERNAL

    def supported_features(self) -> FileReturnType:
        return self.supported_return_types()

    def contains_private_data(self) -> bool:
        return True
