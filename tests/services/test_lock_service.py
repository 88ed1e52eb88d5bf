"""Tests for the single-instance PID lock."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from fokus.services.lock_service import AlreadyRunningError, InstanceLock, _pid_alive


@pytest.fixture()
def lock_path(tmp_path: Path) -> Path:
    return tmp_path / "fokus" / "fokus.lock"


class TestAcquire:
    def test_writes_own_pid(self, lock_path):
        lock = InstanceLock(lock_path)
        lock.acquire()
        assert lock.acquired
        assert lock_path.read_text() == str(os.getpid())

    def test_live_holder_is_refused(self, lock_path, mocker):
        lock_path.parent.mkdir(parents=True)
        lock_path.write_text("4242")
        mocker.patch("fokus.services.lock_service._pid_alive", return_value=True)

        with pytest.raises(AlreadyRunningError) as exc_info:
            InstanceLock(lock_path).acquire()

        assert exc_info.value.pid == 4242
        assert "already running" in str(exc_info.value)
        assert lock_path.read_text() == "4242"

    def test_stale_lock_is_replaced(self, lock_path, mocker):
        lock_path.parent.mkdir(parents=True)
        lock_path.write_text("4242")
        mocker.patch("fokus.services.lock_service._pid_alive", return_value=False)

        InstanceLock(lock_path).acquire()
        assert lock_path.read_text() == str(os.getpid())

    def test_garbage_lock_is_replaced(self, lock_path):
        lock_path.parent.mkdir(parents=True)
        lock_path.write_text("not a pid")

        InstanceLock(lock_path).acquire()
        assert lock_path.read_text() == str(os.getpid())

    def test_second_instance_in_same_process_is_refused(self, lock_path):
        with InstanceLock(lock_path):
            with pytest.raises(AlreadyRunningError):
                InstanceLock(lock_path).acquire()


class TestRelease:
    def test_release_removes_file(self, lock_path):
        lock = InstanceLock(lock_path)
        lock.acquire()
        lock.release()
        assert not lock_path.exists()
        assert not lock.acquired

    def test_release_is_idempotent(self, lock_path):
        lock = InstanceLock(lock_path)
        lock.acquire()
        lock.release()
        lock_path.write_text("someone else")
        lock.release()
        assert lock_path.exists()

    def test_release_without_acquire_leaves_file(self, lock_path):
        lock_path.parent.mkdir(parents=True)
        lock_path.write_text("4242")
        InstanceLock(lock_path).release()
        assert lock_path.exists()

    def test_context_manager_releases_on_error(self, lock_path):
        with pytest.raises(RuntimeError):
            with InstanceLock(lock_path):
                raise RuntimeError("boom")
        assert not lock_path.exists()


class TestPidAlive:
    def test_current_process_is_alive(self):
        assert _pid_alive(os.getpid())

    @pytest.mark.parametrize("pid", [0, -1])
    def test_non_positive_pids_are_dead(self, pid):
        assert not _pid_alive(pid)
