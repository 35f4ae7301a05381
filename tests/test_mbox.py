import errno
import threading

import pytest

from unikit.mbox import Mbox, MboxError


def test_messages_come_out_in_order():
    box = Mbox(3)
    for msg in ("a", "b", "c"):
        box.post(msg)
    assert [box.recv(), box.recv(), box.recv()] == ["a", "b", "c"]


def test_post_try_raises_when_full():
    box = Mbox(2)
    box.post_try(1)
    box.post_try(2)
    with pytest.raises(MboxError) as info:
        box.post_try(3)
    assert info.value.errno == errno.ENOBUFS


def test_recv_try_raises_when_empty():
    box = Mbox(1)
    with pytest.raises(MboxError):
        box.recv_try()


def test_zero_size_mailbox_rejects_posts():
    box = Mbox(0)
    with pytest.raises(MboxError):
        box.post_try("x")


def test_negative_size_raises():
    with pytest.raises(ValueError):
        Mbox(-1)


def test_post_to_and_recv_to_time_out():
    box = Mbox(1)
    box.post_to("only", 0.01)
    with pytest.raises(MboxError):
        box.post_to("more", 0.02)
    assert box.recv_to(0.01) == "only"
    with pytest.raises(MboxError):
        box.recv_to(0.02)


def test_wraps_around_ring_many_times():
    box = Mbox(2)
    received = []
    for i in range(10):
        box.post_try(i)
        received.append(box.recv_try())
    assert received == list(range(10))


def test_none_is_a_valid_message():
    box = Mbox(1)
    box.post(None)
    assert box.recv_try() is None


def test_room_is_freed_after_receive():
    box = Mbox(1)
    box.post_try("first")
    assert box.recv_try() == "first"
    box.post_try("second")
    assert box.recv_try() == "second"


def test_producer_consumer_threads():
    box = Mbox(4)
    items = list(range(200))
    received = []

    def producer():
        for item in items:
            box.post(item)

    def consumer():
        for _ in items:
            received.append(box.recv())

    threads = [threading.Thread(target=producer), threading.Thread(target=consumer)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(10)
    assert received == items
    with pytest.raises(MboxError):
        box.recv_try()