from __future__ import annotations

from datetime import datetime

from nvidia_wayland_autofix.lib.sysconfig import DRM_MODESET_OPTIONS, backup_monitors, write_drm_modeset

NOW = datetime(2026, 10, 18, 9, 5)


def test_drm_modeset_goes_through_sudo_tee(fake_system):
    write_drm_modeset("/etc/modprobe.d/nvidia-drm.conf")
    assert fake_system.commands() == ["sudo tee /etc/modprobe.d/nvidia-drm.conf"]
    assert fake_system.inputs[("sudo", "tee", "/etc/modprobe.d/nvidia-drm.conf")] == "options nvidia-drm modeset=1\n"
    assert DRM_MODESET_OPTIONS.strip() == "options nvidia-drm modeset=1"


def test_drm_modeset_dry_run(fake_system):
    write_drm_modeset(dry_run=True)
    assert fake_system.calls == []


def test_existing_monitors_xml_is_moved_with_timestamp(tmp_path, fake_system):
    monitors = tmp_path / "monitors.xml"
    monitors.write_text("<monitors/>")

    dest = backup_monitors(monitors, now=NOW)

    assert dest == tmp_path / "monitors.xml.bak.2026-10-18-0905"
    assert fake_system.calls == [["mv", str(monitors), str(dest)]]


def test_missing_monitors_xml_is_a_no_op(tmp_path, fake_system, caplog):
    caplog.set_level("INFO")
    assert backup_monitors(tmp_path / "monitors.xml", now=NOW) is None
    assert fake_system.calls == []
    assert "No monitors.xml found." in caplog.text


def test_monitors_backup_dry_run_leaves_file(tmp_path, fake_system):
    monitors = tmp_path / "monitors.xml"
    monitors.write_text("<monitors/>")
    backup_monitors(monitors, dry_run=True, now=NOW)
    assert monitors.exists()
    assert fake_system.calls == []
