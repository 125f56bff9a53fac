"""Domain services."""
from convertaphile.domain.services.classifier import classify, detect_source, video_candidates
from convertaphile.domain.services.policy import (
    AUDIO_TARGET_FLAGS,
    AVIF_FLAGS,
    POLICY_OVERRIDES,
    SINGLE_FRAME_FLAGS,
    VIDEO_TARGET_FLAGS,
    build_command,
    policy_flags,
)

__all__ = [
    "AUDIO_TARGET_FLAGS",
    "AVIF_FLAGS",
    "POLICY_OVERRIDES",
    "SINGLE_FRAME_FLAGS",
    "VIDEO_TARGET_FLAGS",
    "build_command",
    "classify",
    "detect_source",
    "policy_flags",
    "video_candidates",
]
