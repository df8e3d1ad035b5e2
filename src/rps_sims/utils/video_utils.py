# src/rps_sims/utils/video_utils.py

from __future__ import annotations

# x264 settings: previews trade quality for encode speed
_PRESETS = {
    True: {"crf": 35, "preset": "ultrafast", "tune": "zerolatency"},
    False: {"crf": 18, "preset": "slow", "tune": None},
}


def ffmpeg_args(preview: bool = False, crf: int | None = None) -> list[str]:
    """Extra ffmpeg arguments for FFMpegWriter."""
    settings = dict(_PRESETS[bool(preview)])
    if crf is not None:
        if not 0 <= crf <= 51:
            raise ValueError(f"crf must be in 0..51, got {crf}")
        settings["crf"] = crf
    args = ["-crf", str(settings["crf"]), "-preset", settings["preset"]]
    if settings["tune"] is not None:
        args += ["-tune", settings["tune"]]
    # most players only decode 4:2:0
    args += ["-pix_fmt", "yuv420p"]
    return args


def even_pixels(width_px: int | None, height_px: int | None) -> tuple[int | None, int | None]:
    """Round a requested frame size down to even numbers, which yuv420p requires."""
    def _even(v):
        return None if v is None else max(int(v) // 2 * 2, 2)
    return _even(width_px), _even(height_px)
