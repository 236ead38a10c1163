"""Abstract base class for ShortURL data access objects (DAOs).

This class establishes a consistent contract for all ShortURL DAO implementations,
regardless of the underlying storage mechanism (e.g., process memory, Redis).

Responsibilities:
    - Provide an interface for inserting and retrieving ShortURLModel objects.
    - Provide the lookups the Registry needs to assign identifiers
      (find by original URL, maximum stored identifier).
    - Standardize error handling across multiple data store implementations.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from numshortener.models import ShortURLModel
        >>> from numshortener.dao.memory import ShortURLMemoryDAO

        >>> dao = ShortURLMemoryDAO()
        >>> dao.max_id()
        0

        >>> dao.insert(ShortURLModel(original_url='https://www.example.com', short_url=1))
        <ShortURLMemoryDAO>

        >>> dao.get(1).original_url
        'https://www.example.com'

        >>> dao.find('https://www.example.com').short_url
        1

NOTE:
    Records are immutable. The DAO does not provide an interface to update
    or delete entries.
"""

from abc import ABC, abstractmethod

from numshortener.models import ShortURLModel


class ShortURLBaseDAO(ABC):
    """Interface for ShortURL data access objects (DAOs).

    Methods:
        insert(short_url: ShortURLModel, **kwargs) -> ShortURLBaseDAO:
            Atomically insert a new ShortURLModel into the data store.
            Raises ShortURLAlreadyExistsError if the identifier or the original URL is already stored.
            Raises DataStoreError on connection or write failure.

        get(short_url: int, **kwargs) -> ShortURLModel:
            Retrieve a ShortURLModel from the data store by identifier.
            Raises ShortURLNotFoundError if the entry does not exist.
            Raises DataStoreError on connection or read failure.

        find(original_url: str, **kwargs) -> ShortURLModel | None:
            Retrieve a ShortURLModel by its original URL. Returns None if not found.
            Raises DataStoreError on connection or read failure.

        max_id(**kwargs) -> int:
            Return the highest stored identifier, 0 when the store is empty.
            Raises DataStoreError on connection or read failure.

        count(**kwargs) -> int:
            Return the number of stored records.
            Raises DataStoreError on connection or read failure.

    Subclassing:
        Datastore-specific implementations (e.g., ShortURLMemoryDAO or
        ShortURLRedisDAO) must extend this class and implement all
        abstract methods.
    """

    @abstractmethod
    def insert(self, short_url: ShortURLModel, **kwargs) -> 'ShortURLBaseDAO':
        """Insert a new ShortURLModel into the data store.

        The existence checks and the write must happen as one atomic operation,
        so two concurrent inserts can never store the same identifier or the
        same original URL twice.

        Args:
            short_url (ShortURLModel):
                The ShortURLModel instance to be inserted.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLBaseDAO: self (for method chaining)

        Raises:
            ShortURLAlreadyExistsError:
                If a record with the same identifier or original URL already exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def get(self, short_url: int, **kwargs) -> ShortURLModel:
        """Retrieve a ShortURLModel from the data store by its identifier.

        Args:
            short_url (int):
                The identifier of the ShortURLModel to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLModel: The stored ShortURLModel instance.

        Raises:
            ShortURLNotFoundError:
                If no ShortURLModel with the given identifier exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def find(self, original_url: str, **kwargs) -> ShortURLModel | None:
        """Retrieve a ShortURLModel from the data store by its original URL.

        Args:
            original_url (str):
                The exact (byte-for-byte) original URL string.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLModel | None: The ShortURLModel instance if found, otherwise None.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def max_id(self, **kwargs) -> int:
        """Retrieve the highest identifier currently stored.

        The value is derived from the stored records themselves, so nothing
        besides the records has to survive a restart.

        Returns:
            int: The highest stored identifier, or 0 if there are no records.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def count(self, **kwargs) -> int:
        """Retrieve the number of stored records.

        Returns:
            int: The number of records.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass
