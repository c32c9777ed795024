"""NVIDIA Wayland AutoFix.

Recovers a working GNOME + Wayland + NVIDIA setup after an Ubuntu or kernel
upgrade:
- automatic NVIDIA driver detection (prefers the OPEN kernel modules)
- kernel header + DKMS handling
- dry-run and detect-only modes
- per-section timing and success markers, mirrored to a log file
"""

__all__ = []
