"""
Base client provider interface
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Any, Optional
from ..exceptions import ClientInitializationError

logger = logging.getLogger(__name__)


class BaseClientProvider(ABC):
    """
    Lazily builds a single API handle and shares it with every caller.

    The first call to get_handle() runs _build_handle() while holding the
    provider lock; concurrent first callers wait on the lock and then see the
    same handle (or the same failure). A failed build is never retried.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._handle = None
        self._error: Optional[ClientInitializationError] = None
        self._initialized = False

    @abstractmethod
    def _build_handle(self) -> Any:
        """Construct the API handle"""
        pass

    @property
    def initialized(self) -> bool:
        """True once construction has been attempted"""
        return self._initialized

    def get_handle(self) -> Any:
        """Return the shared handle, building it on first use"""
        if not self._initialized:
            with self._lock:
                if not self._initialized:
                    self._initialize()

        if self._error is not None:
            raise self._error
        return self._handle

    def _initialize(self) -> None:
        try:
            self._handle = self._build_handle()
        except ClientInitializationError as e:
            self._error = e
        except Exception as e:
            err = ClientInitializationError(f"Failed to initialize client: {str(e)}")
            err.__cause__ = e
            self._error = err

        # An interrupted build (KeyboardInterrupt, SystemExit) leaves the provider uninitialized
        self._initialized = True

        if self._error is not None:
            logger.error(f"{type(self).__name__} initialization failed: {self._error}")
