import errno

import pytest

from unikit.netdev import (
    ETH_PAYLOAD_MAXLEN,
    FEATURE_RXQ_INTR_AVAILABLE,
    FEATURE_TXQ_INTR_AVAILABLE,
    MAX_NB_QUEUES,
    Conf,
    EinfoType,
    Einfo,
    Hwaddr,
    Info,
    Ipv4Addr,
    Netdev,
    Operations,
    QueueInfo,
    RxqueueConf,
    State,
    TxqueueConf,
    rxintr_supported,
)


class DummyOps(Operations):
    def mtu_get(self, dev):
        return ETH_PAYLOAD_MAXLEN

    def promiscuous_get(self, dev):
        return 0

    def info_get(self, dev):
        return Info(1, 1, True, ETH_PAYLOAD_MAXLEN, 0, 0, 1, FEATURE_RXQ_INTR_AVAILABLE)

    def txq_info_get(self, dev, queue_id):
        return QueueInfo(8, 1, 1, True)

    def rxq_info_get(self, dev, queue_id):
        return QueueInfo(8, 1, 1, True)

    def configure(self, dev, conf):
        dev.state = State.CONFIGURED

    def txq_configure(self, dev, queue_id, nb_desc, tx_conf):
        return ("tx", queue_id, nb_desc)

    def rxq_configure(self, dev, queue_id, nb_desc, rx_conf):
        return ("rx", queue_id, nb_desc)

    def start(self, dev):
        dev.state = State.RUNNING


def test_rxintr_supported():
    assert rxintr_supported(FEATURE_RXQ_INTR_AVAILABLE) is True
    assert rxintr_supported(FEATURE_TXQ_INTR_AVAILABLE) is False
    assert rxintr_supported(FEATURE_RXQ_INTR_AVAILABLE | FEATURE_TXQ_INTR_AVAILABLE)
    assert rxintr_supported(0) is False


def test_ipv4_parse_round_trip():
    addr = Ipv4Addr.parse("192.168.0.1")
    assert str(addr) == "192.168.0.1"
    assert [addr[i] for i in range(4)] == [192, 168, 0, 1]
    assert addr == Ipv4Addr(192, 168, 0, 1)


def test_ipv4_parse_plus_sign_and_leading_zero():
    assert Ipv4Addr.parse("+10.001.2.3") == Ipv4Addr(10, 1, 2, 3)


@pytest.mark.parametrize(
    "text",
    ["1.2.3", "1.2.3.4.5", "256.1.1.1", "a.b.c.d", "", "1..2.3", " 1.2.3.4", "-1.2.3.4"],
)
def test_ipv4_parse_rejects(text):
    with pytest.raises(ValueError):
        Ipv4Addr.parse(text)


def test_ipv4_setitem():
    addr = Ipv4Addr(10, 0, 0, 1)
    addr[3] = 254
    assert addr[3] == 254
    assert addr == Ipv4Addr.parse("10.0.0.254")


def test_ipv4_setitem_out_of_range():
    addr = Ipv4Addr()
    with pytest.raises(ValueError):
        addr[0] = 300
    assert addr[0] == 0
    assert str(addr) == "0.0.0.0"
    with pytest.raises(IndexError):
        addr[4]


def test_einfo_defaults_are_independent():
    einfo = Einfo()
    einfo.ipv4_addr[0] = 10
    assert einfo.ipv4_net_mask == Ipv4Addr()
    assert Einfo().ipv4_addr == Ipv4Addr()


def test_hwaddr_str_and_length():
    hw = Hwaddr(bytes([2, 0, 0, 0, 0, 1]))
    assert str(hw) == "02:00:00:00:00:01"
    with pytest.raises(ValueError):
        Hwaddr(b"\x01\x02")


def test_operations_is_abstract():
    with pytest.raises(TypeError):
        Operations()


def test_optional_operations_not_supported():
    ops = DummyOps()
    dev = Netdev(ops, "dummy")
    with pytest.raises(OSError) as info:
        ops.mtu_set(dev, 1000)
    assert info.value.errno == errno.ENOTSUP
    with pytest.raises(OSError):
        ops.rxq_intr_enable(dev, None)
    with pytest.raises(OSError):
        ops.hwaddr_set(dev, Hwaddr(bytes(6)))
    assert ops.hwaddr_get(dev) is None
    assert ops.einfo_get(dev, EinfoType.IPV4_ADDR_STR) is None


def test_device_life_cycle_through_ops():
    ops = DummyOps()
    dev = Netdev(ops, "dummy")
    assert dev.state is State.UNCONFIGURED
    assert dev.drv_name == "dummy"
    ops.configure(dev, Conf(nb_rx_queues=1, nb_tx_queues=1))
    assert dev.state is State.CONFIGURED
    assert ops.rxq_configure(dev, 0, 8, RxqueueConf()) == ("rx", 0, 8)
    assert ops.txq_configure(dev, 0, 4, TxqueueConf()) == ("tx", 0, 4)
    ops.start(dev)
    assert dev.state is State.RUNNING


def test_rx_event_calls_handler():
    dev = Netdev(DummyOps(), "dummy")
    calls = []
    cookie = object()
    dev.set_rx_handler(0, lambda d, q, c: calls.append((d, q, c)), cookie)
    dev.rx_event(0)
    dev.rx_event(0)
    assert calls == [(dev, 0, cookie), (dev, 0, cookie)]


def test_rx_event_queue_out_of_range():
    dev = Netdev(DummyOps(), "dummy")
    with pytest.raises(IndexError):
        dev.rx_event(MAX_NB_QUEUES)
    with pytest.raises(IndexError):
        dev.set_rx_handler(-1, lambda d, q, c: None)


def test_rx_event_without_handler():
    dev = Netdev(DummyOps(), "dummy")
    with pytest.raises(RuntimeError):
        dev.rx_event(0)