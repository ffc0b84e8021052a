import dataclasses
import os
import signal
from unittest import mock

import pytest

from fastchess import signals
from fastchess.signals import ProcessInformation


@pytest.fixture
def clean_state():
    signals.process_list.remove_if(lambda _: True)
    signals.stop.clear()
    signals.abnormal_termination.clear()
    yield
    signals.process_list.remove_if(lambda _: True)
    signals.stop.clear()
    signals.abnormal_termination.clear()


def test_process_information_is_immutable():
    info = ProcessInformation(identifier=10, fd_write=3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        info.identifier = 11
    assert info.identifier == 10
    assert info.fd_write == 3


def test_write_to_open_pipes_sends_null_byte(clean_state):
    read_fd, write_fd = os.pipe()
    try:
        signals.process_list.push(ProcessInformation(os.getpid(), write_fd))
        signals.write_to_open_pipes()
        assert os.read(read_fd, 10) == b"\0"
    finally:
        os.close(read_fd)
        os.close(write_fd)


def test_write_to_open_pipes_reaches_every_process(clean_state):
    pipes = [os.pipe() for _ in range(3)]
    try:
        for _, write_fd in pipes:
            signals.process_list.push(ProcessInformation(os.getpid(), write_fd))
        signals.write_to_open_pipes()
        assert [os.read(read_fd, 10) for read_fd, _ in pipes] == [b"\0"] * 3
    finally:
        for read_fd, write_fd in pipes:
            os.close(read_fd)
            os.close(write_fd)


def test_stop_processes_interrupts_then_kills(clean_state):
    signals.process_list.push(ProcessInformation(4242, 7))
    kill_signal = getattr(signal, "SIGKILL", signal.SIGTERM)
    with mock.patch("os.kill") as fake_kill:
        signals.stop_processes()
    assert fake_kill.call_args_list == [
        mock.call(4242, signal.SIGINT),
        mock.call(4242, kill_signal),
    ]
    assert list(signals.process_list) == [ProcessInformation(4242, 7)]


def test_stop_processes_ignores_vanished_processes(clean_state):
    signals.process_list.push(ProcessInformation(1, 7))
    signals.process_list.push(ProcessInformation(2, 8))
    with mock.patch("os.kill", side_effect=ProcessLookupError) as fake_kill:
        signals.stop_processes()
    assert fake_kill.call_count == 4
    assert len(signals.process_list) == 2


def test_ctrl_c_handler_raises_stop_flags(clean_state):
    previous = signal.getsignal(signal.SIGINT)
    try:
        signals.set_ctrl_c_handler()
        signal.raise_signal(signal.SIGINT)
        assert signals.stop.is_set()
        assert signals.abnormal_termination.is_set()
    finally:
        signal.signal(signal.SIGINT, previous)