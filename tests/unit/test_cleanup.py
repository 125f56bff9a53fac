"""Tests for expired file purging and the background sweeper."""

import asyncio
import os
import time

from convertaphile.application.cleanup import ExpiredFileSweeper
from convertaphile.infrastructure.filesystem import purge_expired_files, remove_file, save_uploaded_file


def _age(path, seconds):
    past = time.time() - seconds
    os.utime(path, (past, past))


def test_purge_expired_files(temp_dir):
    old = temp_dir / "old.mp4"
    fresh = temp_dir / "fresh.mp4"
    nested = temp_dir / "nested"
    for path in (old, fresh):
        path.write_bytes(b"data")
    nested.mkdir()
    _age(old, 7200)
    _age(nested, 7200)

    assert purge_expired_files(temp_dir, 3600) == 1
    assert not old.exists()
    assert fresh.exists()
    assert nested.is_dir()


def test_purge_missing_directory(temp_dir):
    assert purge_expired_files(temp_dir / "absent", 60) == 0


def test_save_and_remove(temp_dir):
    target = temp_dir / "uploads" / "uploaded_x.gif"
    save_uploaded_file(b"GIF89a", target)
    assert target.read_bytes() == b"GIF89a"

    assert remove_file(target) is True
    assert not target.exists()
    assert remove_file(target) is True


def test_sweep_once_covers_every_directory(temp_dir):
    uploads = temp_dir / "uploads"
    converted = temp_dir / "converted"
    for directory in (uploads, converted):
        directory.mkdir()
        stale = directory / "stale.bin"
        stale.write_bytes(b"x")
        _age(stale, 120)

    sweeper = ExpiredFileSweeper([uploads, converted], retention_seconds=60, interval_seconds=1)

    assert sweeper.last_run is None
    assert sweeper.sweep_once() == 2
    assert sweeper.last_run is not None
    assert list(uploads.iterdir()) == []
    assert list(converted.iterdir()) == []


def test_run_sweeps_until_stopped(temp_dir):
    stale = temp_dir / "stale.wav"
    stale.write_bytes(b"x")
    _age(stale, 120)
    sweeper = ExpiredFileSweeper([temp_dir], retention_seconds=60, interval_seconds=30)

    async def scenario():
        task = asyncio.create_task(sweeper.run())
        for _ in range(100):
            if sweeper.last_run is not None:
                break
            await asyncio.sleep(0.01)
        assert sweeper.is_running is True
        sweeper.stop()
        await asyncio.wait_for(task, timeout=5)

    asyncio.run(scenario())

    assert not stale.exists()
    assert sweeper.is_running is False


def test_second_run_returns_immediately(temp_dir):
    sweeper = ExpiredFileSweeper([temp_dir], retention_seconds=60, interval_seconds=30)

    async def scenario():
        task = asyncio.create_task(sweeper.run())
        await asyncio.sleep(0.05)
        await asyncio.wait_for(sweeper.run(), timeout=1)
        sweeper.stop()
        await asyncio.wait_for(task, timeout=5)

    asyncio.run(scenario())
    assert sweeper.is_running is False


def test_sweeper_restarts_on_a_new_event_loop(temp_dir):
    sweeper = ExpiredFileSweeper([temp_dir], retention_seconds=60, interval_seconds=30)

    async def one_lifetime():
        task = asyncio.create_task(sweeper.run())
        for _ in range(100):
            if sweeper.is_running:
                break
            await asyncio.sleep(0.01)
        sweeper.stop()
        await asyncio.wait_for(task, timeout=5)

    for _ in range(2):
        stale = temp_dir / "stale.mp3"
        stale.write_bytes(b"x")
        _age(stale, 120)

        asyncio.run(one_lifetime())

        assert not stale.exists()
        assert sweeper.is_running is False


def test_stop_before_start_ends_the_run(temp_dir):
    sweeper = ExpiredFileSweeper([temp_dir], retention_seconds=60, interval_seconds=30)

    async def scenario():
        task = asyncio.create_task(sweeper.run())
        sweeper.stop()
        await asyncio.wait_for(task, timeout=5)

    asyncio.run(scenario())
    assert sweeper.is_running is False
