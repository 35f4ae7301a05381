"""Network device interface: device descriptions, driver operations and RX events."""

from __future__ import annotations

import errno
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, Optional

# Header fields
ETH_ADDR_LEN = 6
ETH_TYPE_LEN = 2
ETH_8021Q_LEN = ETH_TYPE_LEN + 2

# Ethernet headers: untagged, single VLAN tag (802.1q), double VLAN tag (802.1ad)
ETH_HDR_UNTAGGED_LEN = 2 * ETH_ADDR_LEN + ETH_TYPE_LEN
ETH_HDR_8021Q_LEN = ETH_HDR_UNTAGGED_LEN + ETH_8021Q_LEN
ETH_HDR_8021AD_LEN = ETH_HDR_UNTAGGED_LEN + 2 * ETH_8021Q_LEN

# Payload
ETH_PAYLOAD_MAXLEN = 1500
ETH_JPAYLOAD_MAXLEN = 9000  # jumbo frame

# Frame sizes
ETH_FRAME_MINLEN = 60

ETH_FRAME_UNTAGGED_MAXLEN = ETH_HDR_UNTAGGED_LEN + ETH_PAYLOAD_MAXLEN
ETH_FRAME_8021Q_MAXLEN = ETH_HDR_8021Q_LEN + ETH_PAYLOAD_MAXLEN
ETH_FRAME_8021AD_MAXLEN = ETH_HDR_8021AD_LEN + ETH_PAYLOAD_MAXLEN
ETH_FRAME_MAXLEN = ETH_FRAME_8021AD_MAXLEN

ETH_JFRAME_UNTAGGED_MAXLEN = ETH_HDR_UNTAGGED_LEN + ETH_JPAYLOAD_MAXLEN
ETH_JFRAME_8021Q_MAXLEN = ETH_HDR_8021Q_LEN + ETH_JPAYLOAD_MAXLEN
ETH_JFRAME_8021AD_MAXLEN = ETH_HDR_8021AD_LEN + ETH_JPAYLOAD_MAXLEN
ETH_JFRAME_MAXLEN = ETH_JFRAME_8021AD_MAXLEN

NETDEV_HWADDR_LEN = ETH_ADDR_LEN

# Feature bits: the device supports rx/tx queue interrupts.
FEATURE_RXQ_INTR_BIT = 0
FEATURE_RXQ_INTR_AVAILABLE = 1 << FEATURE_RXQ_INTR_BIT
FEATURE_TXQ_INTR_BIT = 1
FEATURE_TXQ_INTR_AVAILABLE = 1 << FEATURE_TXQ_INTR_BIT

# Status flags returned by rx and tx functions
STATUS_SUCCESS = 0x1
STATUS_MORE = 0x2
STATUS_UNDERRUN = 0x4

MAX_NB_QUEUES = 16

QueueEvent = Callable[["Netdev", int, Any], None]
AllocRxpkts = Callable[[Any, int], list]


def rxintr_supported(feature: int) -> bool:
    """Return whether the feature bitmap announces RX queue interrupts."""
    return feature & FEATURE_RXQ_INTR_AVAILABLE != 0


def _not_supported(what: str) -> OSError:
    return OSError(errno.ENOTSUP, f"{what} is not supported by this driver")


@dataclass(frozen=True)
class Hwaddr:
    """An Ethernet hardware address."""

    addr_bytes: bytes

    def __post_init__(self) -> None:
        raw = bytes(self.addr_bytes)
        if len(raw) != NETDEV_HWADDR_LEN:
            raise ValueError(
                f"hardware address must be {NETDEV_HWADDR_LEN} bytes, got {len(raw)}"
            )
        object.__setattr__(self, "addr_bytes", raw)

    def __str__(self) -> str:
        return ":".join(f"{b:02x}" for b in self.addr_bytes)


@dataclass
class Info:
    """Network device capabilities."""

    max_rx_queues: int
    max_tx_queues: int
    in_queue_pairs: bool
    max_mtu: int
    nb_encap_tx: int
    nb_encap_rx: int
    ioalign: int
    features: int


@dataclass
class QueueInfo:
    """Descriptor ring limitations of a queue."""

    nb_max: int
    nb_min: int
    nb_align: int
    nb_is_power_of_two: bool


@dataclass
class Conf:
    """Network device configuration."""

    nb_rx_queues: int
    nb_tx_queues: int


class State(Enum):
    """Life-cycle state of a network device."""

    INVALID = auto()
    UNCONFIGURED = auto()
    CONFIGURED = auto()
    RUNNING = auto()


class EinfoType(Enum):
    """Kinds of extra information a driver may forward.

    ``*_NINT16`` values are raw network-order integers, ``*_STR`` values strings.
    """

    IPV4_ADDR_NINT16 = auto()
    IPV4_ADDR_STR = auto()
    IPV4_MASK_NINT16 = auto()
    IPV4_MASK_STR = auto()
    IPV4_GW_NINT16 = auto()
    IPV4_GW_STR = auto()
    IPV4_DNS0_NINT16 = auto()
    IPV4_DNS0_STR = auto()
    IPV4_DNS1_NINT16 = auto()
    IPV4_DNS1_STR = auto()


@dataclass
class RxqueueConf:
    """Configuration of an RX queue."""

    callback: Optional[QueueEvent] = None
    callback_cookie: Any = None
    alloc_rxpkts: Optional[AllocRxpkts] = None
    alloc_rxpkts_argp: Any = None
    allocator: Any = None


@dataclass
class TxqueueConf:
    """Configuration of a TX queue."""

    allocator: Any = None


# Which field of Einfo answers each kind of extra information, and in what form.
_EINFO_FIELDS = {
    EinfoType.IPV4_ADDR_NINT16: ("ipv4_addr", False),
    EinfoType.IPV4_ADDR_STR: ("ipv4_addr", True),
    EinfoType.IPV4_MASK_NINT16: ("ipv4_net_mask", False),
    EinfoType.IPV4_MASK_STR: ("ipv4_net_mask", True),
    EinfoType.IPV4_GW_NINT16: ("ipv4_gw_addr", False),
    EinfoType.IPV4_GW_STR: ("ipv4_gw_addr", True),
}


class Operations(ABC):
    """Functions a network driver exports.

    Optional setters raise ``OSError(ENOTSUP)`` unless a driver overrides them;
    their arguments are still checked first.
    """

    def rxq_intr_enable(self, dev: Netdev, queue: Any) -> None:
        """Enable interrupts of an RX queue."""
        if not rxintr_supported(self.info_get(dev).features):
            raise OSError(errno.ENOTSUP, "device does not support RX queue interrupts")
        raise _not_supported("enabling RX queue interrupts")

    def rxq_intr_disable(self, dev: Netdev, queue: Any) -> None:
        """Disable interrupts of an RX queue."""
        if not rxintr_supported(self.info_get(dev).features):
            raise OSError(errno.ENOTSUP, "device does not support RX queue interrupts")
        raise _not_supported("disabling RX queue interrupts")

    def hwaddr_get(self, dev: Netdev) -> Optional[Hwaddr]:
        """Return the hardware address recorded on the device, or None."""
        return dev.hwaddr

    def hwaddr_set(self, dev: Netdev, hwaddr: Hwaddr) -> None:
        """Set the hardware address."""
        if not isinstance(hwaddr, Hwaddr):
            raise TypeError(f"expected a Hwaddr, got {type(hwaddr).__name__}")
        raise _not_supported("setting the hardware address")

    @abstractmethod
    def mtu_get(self, dev: Netdev) -> int:
        """Return the MTU."""

    def mtu_set(self, dev: Netdev, mtu: int) -> None:
        """Set the MTU."""
        max_mtu = self.info_get(dev).max_mtu
        if not 0 < mtu <= max_mtu:
            raise ValueError(f"MTU {mtu} outside 1..{max_mtu}")
        raise _not_supported("setting the MTU")

    def promiscuous_set(self, dev: Netdev, mode: int) -> None:
        """Enable or disable promiscuous mode."""
        if mode < 0:
            raise ValueError(f"promiscuous mode must not be negative, got {mode}")
        if mode == self.promiscuous_get(dev):
            return
        raise _not_supported("setting promiscuous mode")

    @abstractmethod
    def promiscuous_get(self, dev: Netdev) -> int:
        """Return the current promiscuous mode."""

    @abstractmethod
    def info_get(self, dev: Netdev) -> Info:
        """Return the device capabilities."""

    @abstractmethod
    def txq_info_get(self, dev: Netdev, queue_id: int) -> QueueInfo:
        """Return the limitations of a TX queue."""

    @abstractmethod
    def rxq_info_get(self, dev: Netdev, queue_id: int) -> QueueInfo:
        """Return the limitations of an RX queue."""

    def einfo_get(self, dev: Netdev, econf: EinfoType) -> Any:
        """Return extra configuration information from the device, or None.

        Addresses that are still 0.0.0.0 count as not configured.
        """
        entry = _EINFO_FIELDS.get(econf)
        if entry is None:
            return None
        name, as_text = entry
        addr = getattr(dev.einfo, name)
        octets = bytes(addr[i] for i in range(4))
        if not any(octets):
            return None
        return str(addr) if as_text else octets

    @abstractmethod
    def configure(self, dev: Netdev, conf: Conf) -> None:
        """Configure the device."""

    @abstractmethod
    def txq_configure(
        self, dev: Netdev, queue_id: int, nb_desc: int, tx_conf: TxqueueConf
    ) -> Any:
        """Set up a TX queue and return it."""

    @abstractmethod
    def rxq_configure(
        self, dev: Netdev, queue_id: int, nb_desc: int, rx_conf: RxqueueConf
    ) -> Any:
        """Set up an RX queue and return it."""

    @abstractmethod
    def start(self, dev: Netdev) -> None:
        """Start a configured device."""


@dataclass
class EventHandler:
    """Callback and argument registered for a queue's events."""

    callback: Optional[QueueEvent] = None
    cookie: Any = None


_OCTET = re.compile(r"\+?[0-9]+")


def _check_octet(value: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"address octet must be an int, got {type(value).__name__}")
    if not 0 <= value <= 255:
        raise ValueError(f"address octet must be in 0..255, got {value}")
    return value


class Ipv4Addr:
    """A mutable IPv4 address of four octets."""

    __slots__ = ("_octets",)

    def __init__(self, a: int = 0, b: int = 0, c: int = 0, d: int = 0) -> None:
        self._octets = [_check_octet(v) for v in (a, b, c, d)]

    @classmethod
    def parse(cls, text: str) -> Ipv4Addr:
        """Parse dotted-quad notation, raising ValueError if it is malformed."""
        parts = text.split(".")
        if len(parts) != 4:
            raise ValueError(f"invalid IPv4 address: {text!r}")
        octets = []
        for part in parts:
            if not _OCTET.fullmatch(part):
                raise ValueError(f"invalid IPv4 address: {text!r}")
            value = int(part)
            if value > 255:
                raise ValueError(f"invalid IPv4 address: {text!r}")
            octets.append(value)
        return cls(*octets)

    def __getitem__(self, index: int) -> int:
        return self._octets[index]

    def __setitem__(self, index: int, value: int) -> None:
        self._octets[index] = _check_octet(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ipv4Addr):
            return NotImplemented
        return self._octets == other._octets

    def __hash__(self) -> int:
        return hash(tuple(self._octets))

    def __str__(self) -> str:
        return ".".join(str(o) for o in self._octets)

    def __repr__(self) -> str:
        return f"Ipv4Addr({', '.join(str(o) for o in self._octets)})"


@dataclass
class Einfo:
    """Address configuration of a network device."""

    ipv4_addr: Ipv4Addr = field(default_factory=Ipv4Addr)
    ipv4_net_mask: Ipv4Addr = field(default_factory=Ipv4Addr)
    ipv4_gw_addr: Ipv4Addr = field(default_factory=Ipv4Addr)


class Netdev:
    """A network device driven by an :class:`Operations` implementation."""

    def __init__(self, ops: Operations, drv_name: str = "") -> None:
        self.ops = ops
        self.drv_name = drv_name
        self.state = State.UNCONFIGURED
        self.id: Optional[int] = None
        self.hwaddr: Optional[Hwaddr] = None
        self.rxq_handlers = [EventHandler() for _ in range(MAX_NB_QUEUES)]
        self.einfo = Einfo()

    def _check_queue(self, queue_id: int) -> None:
        if not 0 <= queue_id < MAX_NB_QUEUES:
            raise IndexError(f"queue id {queue_id} outside 0..{MAX_NB_QUEUES - 1}")

    def set_rx_handler(
        self, queue_id: int, callback: Optional[QueueEvent], cookie: Any = None
    ) -> None:
        """Register the callback run on events of an RX queue."""
        self._check_queue(queue_id)
        handler = self.rxq_handlers[queue_id]
        handler.callback = callback
        handler.cookie = cookie

    def rx_event(self, queue_id: int) -> None:
        """Forward an RX queue event to the registered callback."""
        self._check_queue(queue_id)
        handler = self.rxq_handlers[queue_id]
        if handler.callback is None:
            raise RuntimeError(f"no event handler registered for RX queue {queue_id}")
        handler.callback(self, queue_id, handler.cookie)