"""End-to-end conversions against real ffmpeg/ffprobe binaries."""

import asyncio
import subprocess

import pytest

from convertaphile.application.conversion import ConversionService, convert
from convertaphile.domain.models.formats import MediaFamily, MediaFormat
from tests.conftest import requires_ffmpeg

pytestmark = requires_ffmpeg

LOSSY = {MediaFormat.JPEG, MediaFormat.WEBP, MediaFormat.MP3, MediaFormat.AAC, MediaFormat.OGG}
LOSSLESS = {MediaFormat.PNG, MediaFormat.BMP, MediaFormat.TIFF, MediaFormat.WAV, MediaFormat.FLAC}


def _generate(path, *source_args):
    subprocess.run(
        ["ffmpeg", "-hide_banner", "-loglevel", "error", "-y", *source_args, str(path)],
        check=True,
        capture_output=True,
    )
    return path


@pytest.fixture
def sample_gif(temp_dir):
    return _generate(temp_dir / "sample.gif", "-f", "lavfi", "-i", "testsrc=duration=1:size=64x64:rate=5")


@pytest.fixture
def sample_mp4(temp_dir):
    return _generate(
        temp_dir / "sample.mp4",
        "-f", "lavfi", "-i", "testsrc=duration=1:size=64x64:rate=10",
        "-f", "lavfi", "-i", "sine=frequency=440:duration=1",
        "-c:v", "mpeg4", "-c:a", "aac", "-shortest",
    )


@pytest.fixture
def sample_wav(temp_dir):
    return _generate(temp_dir / "sample.wav", "-f", "lavfi", "-i", "sine=frequency=440:duration=1")


def _curated_pairs(samples):
    """Lossy sources skip lossless targets; photo and audio never mix."""
    pairs = []
    for source_format, path in samples:
        for target in ("png", "jpeg", "bmp", "mp3", "wav", "flac"):
            target_format = MediaFormat(target)
            if source_format in LOSSY and target_format in LOSSLESS:
                continue
            if {source_format.family, target_format.family} == {MediaFamily.PHOTO, MediaFamily.AUDIO}:
                continue
            pairs.append((path, target))
    return pairs


def test_gif_to_jpeg(sample_gif, temp_dir):
    output = temp_dir / "frame.jpeg"

    result = asyncio.run(convert(sample_gif, "jpeg", output_path=output))

    assert result.success is True, result.stderr
    assert result.exit_code == 0
    assert output.stat().st_size > 0


def test_detects_generated_samples(sample_gif, sample_mp4, sample_wav):
    service = ConversionService()

    async def detect_all():
        return [await service.detect(path) for path in (sample_gif, sample_mp4, sample_wav)]

    detected = [source.format for source in asyncio.run(detect_all())]
    assert detected == [MediaFormat.GIF, MediaFormat.MP4, MediaFormat.WAV]


def test_video_to_audio_drops_video_stream(sample_mp4, temp_dir):
    service = ConversionService()
    output = temp_dir / "soundtrack.mp3"

    result = asyncio.run(service.convert(sample_mp4, "mp3", output))
    assert result.success is True, result.stderr

    report = asyncio.run(service.probe(output))
    assert report.has_stream("audio")
    assert not report.has_stream("video")


def test_curated_matrix(sample_gif, sample_mp4, sample_wav, temp_dir):
    samples = [(MediaFormat.GIF, sample_gif), (MediaFormat.MP4, sample_mp4), (MediaFormat.WAV, sample_wav)]
    service = ConversionService()

    async def run_all():
        results = []
        for index, (path, target) in enumerate(_curated_pairs(samples)):
            output = temp_dir / f"out_{index}.{target}"
            results.append((path.name, target, output, await service.convert(path, target, output)))
        return results

    for name, target, output, result in asyncio.run(run_all()):
        assert result.success is True, f"{name} -> {target}: {result.stderr}"
        assert output.stat().st_size > 0


def test_garbage_input_is_rejected(temp_dir):
    garbage = temp_dir / "garbage.mp4"
    garbage.write_bytes(b"definitely not a video")

    result = asyncio.run(convert(garbage, "png"))

    assert result.success is False
    assert result.exit_code == -1
