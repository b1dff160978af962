"""
Exchange Manager: Central Registry for Exchange Descriptors

The ExchangeManager maps exchange identifiers to descriptors. The request
builder and the response dispatcher both look descriptors up here.

Descriptors are registered once at start-up and are read on every request.
Writes (register/unregister, used by tests or a hot reload) replace the whole
table under a lock; readers always see a complete table.

Example Usage:
    manager = ExchangeManager()
    descriptor = manager.get_exchange("btce")
    url = descriptor.build_url("btc_usd")

    print(manager.list_exchanges())
    ['btce', 'bter', 'havelock', ...]
"""

import threading
from typing import Dict, Iterable, List, Optional

from cryptick.core.errors import UnknownExchangeError
from cryptick.core.exchange_interface import ExchangeDescriptor
from cryptick.core.logging import logger


class ExchangeManager:
    """
    Central Registry for Exchange Descriptors

    Attributes:
        exchanges: Read-only view of the identifier -> descriptor table

    Example:
        >>> manager = ExchangeManager()
        >>> manager.get_exchange("bitstamp")
        <BitstampExchange(name='bitstamp')>
        >>> manager.has_exchange("nonexistent")
        False
    """

    def __init__(self, descriptors: Optional[Iterable[ExchangeDescriptor]] = None):
        """
        Initialize the manager.

        Args:
            descriptors: Descriptors to register. Defaults to every exchange
                         shipped in cryptick.exchanges.
        """
        if descriptors is None:
            # Imported here: exchange modules import from cryptick.core
            from cryptick.exchanges import default_descriptors
            descriptors = default_descriptors()

        self._lock = threading.Lock()
        self._exchanges: Dict[str, ExchangeDescriptor] = {
            d.name.lower(): d for d in descriptors
        }

        logger.debug(
            f"ExchangeManager initialized with {len(self._exchanges)} exchange(s): "
            f"{', '.join(self._exchanges.keys())}"
        )

    @property
    def exchanges(self) -> Dict[str, ExchangeDescriptor]:
        return dict(self._exchanges)

    # ============================================
    # Lookup
    # ============================================

    def lookup(self, name: str) -> Optional[ExchangeDescriptor]:
        """
        Find a descriptor without raising.

        Args:
            name: Exchange identifier (case-insensitive)

        Returns:
            The descriptor, or None if the exchange is not registered
        """
        return self._exchanges.get(name.lower())

    def get_exchange(self, name: str) -> ExchangeDescriptor:
        """
        Get a descriptor by name.

        Args:
            name: Exchange identifier (case-insensitive)

        Returns:
            ExchangeDescriptor: The registered descriptor

        Raises:
            UnknownExchangeError: If the exchange is not registered
        """
        descriptor = self.lookup(name)
        if descriptor is None:
            available = self.list_exchanges()
            logger.error(f"Exchange '{name}' not found. Available: {', '.join(available)}")
            raise UnknownExchangeError(name, available)
        return descriptor

    def has_exchange(self, name: str) -> bool:
        """Check if an exchange is registered (case-insensitive)."""
        return name.lower() in self._exchanges

    def list_exchanges(self) -> List[str]:
        """Identifiers of all registered exchanges, in registration order."""
        return list(self._exchanges.keys())

    # ============================================
    # Registration
    # ============================================

    def register(self, descriptor: ExchangeDescriptor) -> None:
        """
        Add a descriptor, replacing any with the same name.

        Args:
            descriptor: Descriptor to register
        """
        with self._lock:
            table = dict(self._exchanges)
            table[descriptor.name.lower()] = descriptor
            self._exchanges = table
        logger.info(f"Registered exchange: {descriptor.name}")

    def unregister(self, name: str) -> None:
        """
        Remove a descriptor.

        Raises:
            UnknownExchangeError: If the exchange is not registered
        """
        with self._lock:
            if name.lower() not in self._exchanges:
                raise UnknownExchangeError(name, self.list_exchanges())
            table = dict(self._exchanges)
            del table[name.lower()]
            self._exchanges = table
        logger.info(f"Unregistered exchange: {name}")

    # ============================================
    # Utility Methods
    # ============================================

    def __repr__(self) -> str:
        return f"<ExchangeManager(exchanges={self.list_exchanges()})>"

    def __len__(self) -> int:
        return len(self._exchanges)


# ============================================
# Global Manager Instance
# ============================================

_manager: Optional[ExchangeManager] = None


def get_manager() -> ExchangeManager:
    """
    Get the process-wide ExchangeManager, creating it on first call.

    Example:
        >>> from cryptick.core.exchange_manager import get_manager
        >>> get_manager().get_exchange("okcoin").pair_example
        'ltc_cny'
    """
    global _manager
    if _manager is None:
        _manager = ExchangeManager()
        logger.debug("Created global ExchangeManager instance")
    return _manager
