"""Shared test fixtures for Convertaphile."""

import os
import shutil
import tempfile
from pathlib import Path

import pytest

# Module-level singletons create their storage directories on import.
os.environ.setdefault(
    "CONVERTAPHILE_STORAGE_ROOT_DIR",
    tempfile.mkdtemp(prefix="convertaphile-tests-"),
)

from convertaphile.domain.models.probe import ProbeReport  # noqa: E402

HAS_FFMPEG = shutil.which("ffmpeg") is not None and shutil.which("ffprobe") is not None

requires_ffmpeg = pytest.mark.skipif(not HAS_FFMPEG, reason="ffmpeg/ffprobe not installed")


def pytest_collection_modifyitems(config, items):
    for item in items:
        if "integration" in Path(str(item.fspath)).parts:
            item.add_marker(pytest.mark.ffmpeg)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test isolation."""
    dir_path = tempfile.mkdtemp()
    yield Path(dir_path)
    shutil.rmtree(dir_path, ignore_errors=True)


def make_report(format_name=None, streams=()):
    """Build a ProbeReport from a format name and (codec_type, codec_name) pairs."""
    payload = {
        "streams": [
            {"codec_type": codec_type, "codec_name": codec_name}
            for codec_type, codec_name in streams
        ]
    }
    if format_name is not None:
        payload["format"] = {"format_name": format_name}
    return ProbeReport.model_validate(payload)


@pytest.fixture
def mp4_probe_json() -> str:
    """ffprobe output for a small H.264/AAC MP4, including keys the models ignore."""
    return """
    {
        "streams": [
            {
                "index": 0,
                "codec_name": "h264",
                "codec_long_name": "H.264 / AVC / MPEG-4 AVC / MPEG-4 part 10",
                "profile": "High",
                "codec_type": "video",
                "width": 320,
                "height": 240,
                "pix_fmt": "yuv420p",
                "r_frame_rate": "25/1",
                "disposition": {"default": 1, "attached_pic": 0}
            },
            {
                "index": 1,
                "codec_name": "aac",
                "codec_type": "audio",
                "sample_rate": "44100",
                "channels": 2
            }
        ],
        "format": {
            "filename": "sample.mp4",
            "nb_streams": 2,
            "format_name": "mov,mp4,m4a,3gp,3g2,mj2",
            "format_long_name": "QuickTime / MOV",
            "duration": "2.000000",
            "size": "48213",
            "tags": {"major_brand": "isom"}
        }
    }
    """
