import pytest

from unikit.blkreq import Blkreq, BlkreqOp


def test_new_request_is_pending():
    req = Blkreq(BlkreqOp.READ, 4, 2, bytearray(1024))
    assert req.is_done() is False
    assert req.result == 0
    assert req.start_sector == 4
    assert req.nb_sectors == 2


def test_finish_marks_done_and_sets_result():
    req = Blkreq(BlkreqOp.WRITE, 0, 1)
    req.finish(-5)
    assert req.is_done() is True
    assert req.result == -5


def test_finish_runs_callback_with_cookie():
    seen = []
    cookie = object()
    req = Blkreq(
        BlkreqOp.FFLUSH,
        0,
        0,
        callback=lambda r, c: seen.append((r, c, r.is_done())),
        cookie=cookie,
    )
    req.finish()
    assert seen == [(req, cookie, True)]


@pytest.mark.parametrize("op", [BlkreqOp.READ, BlkreqOp.WRITE, BlkreqOp.FFLUSH])
def test_request_keeps_its_operation(op):
    req = Blkreq(op, 0, 1)
    assert req.operation is op


def test_buffer_is_kept_by_reference():
    buf = bytearray(8)
    req = Blkreq(BlkreqOp.READ, 0, 1, buf)
    req.buffer[0] = 7
    assert buf[0] == 7


@pytest.mark.parametrize("start, count", [(-1, 1), (0, -1)])
def test_negative_sectors_rejected(start, count):
    with pytest.raises(ValueError):
        Blkreq(BlkreqOp.READ, start, count)


def test_operation_must_be_enum():
    with pytest.raises(TypeError):
        Blkreq("read", 0, 1)