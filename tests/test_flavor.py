"""Tests for OS naming and macOS / Windows build flavor detection."""

import sys

import pytest

import build_identity.flavor as flavor
from build_identity.flavor import (
    MacFlavor,
    is_mac_sys_ext,
    is_mobile_build,
    is_sandboxed_macos,
    is_windows_gui,
    is_windows_gui_name,
    mac_flavor_for_path,
    os_display_name,
)
from build_identity.utils import once

SYSEXT_PATH = (
    "/Library/SystemExtensions/0A1B2C3D/io.tailscale.ipn.macsys.network-extension.systemextension"
    "/Contents/MacOS/io.tailscale.ipn.macsys.network-extension"
)
APP_STORE_PATH = "/Applications/Tailscale.app/Contents/MacOS/Tailscale"
APP_EXTENSION_PATH = (
    "/Applications/Tailscale.app/Contents/PlugIns/IPNExtension.appex/Contents/MacOS/IPNExtension"
)
DAEMON_PATH = "/usr/local/bin/tailscaled"


@pytest.fixture
def fresh_mac_flavor(monkeypatch):
    """Give each test its own uncomputed macOS flavor cache."""
    monkeypatch.setattr(flavor, "_mac_flavor", once(flavor._mac_flavor.__wrapped__))


@pytest.fixture
def exe_lookups(monkeypatch):
    """Record executable path lookups; the returned list holds the path to report."""
    calls = []
    state = {"path": ""}

    def fake_executable_path():
        calls.append(state["path"])
        return state["path"]

    monkeypatch.setattr(flavor, "executable_path", fake_executable_path)
    return calls, state


# --- OS naming ---

def test_ios_is_displayed_as_ios(monkeypatch):
    monkeypatch.setattr(sys, "platform", "ios")
    assert os_display_name() == "iOS"


def test_darwin_is_displayed_as_macos(monkeypatch):
    monkeypatch.setattr(sys, "platform", "darwin")
    assert os_display_name() == "macOS"


@pytest.mark.parametrize("platform", ["linux", "win32", "android", "freebsd14", "emscripten"])
def test_other_platforms_pass_through_unchanged(monkeypatch, platform):
    monkeypatch.setattr(sys, "platform", platform)
    assert os_display_name() == platform


def test_android_and_ios_are_mobile(monkeypatch):
    for platform in ("android", "ios"):
        monkeypatch.setattr(sys, "platform", platform)
        assert is_mobile_build() is True


def test_desktop_platforms_are_not_mobile(monkeypatch):
    for platform in ("darwin", "linux", "win32"):
        monkeypatch.setattr(sys, "platform", platform)
        assert is_mobile_build() is False


# --- macOS path rules ---

def test_system_extension_is_also_sandboxed():
    assert mac_flavor_for_path(SYSEXT_PATH) == MacFlavor(is_system_extension=True, is_sandboxed=True)


def test_app_store_app_is_sandboxed_but_not_sysext():
    assert mac_flavor_for_path(APP_STORE_PATH) == MacFlavor(is_system_extension=False, is_sandboxed=True)


def test_app_store_extension_is_sandboxed():
    assert mac_flavor_for_path(APP_EXTENSION_PATH).is_sandboxed is True


def test_plain_daemon_is_neither():
    assert mac_flavor_for_path(DAEMON_PATH) == MacFlavor()


def test_sysext_name_must_match_exactly():
    assert mac_flavor_for_path("/tmp/io.tailscale.ipn.macsys.network-extension.old") == MacFlavor()


def test_empty_path_is_neither():
    assert mac_flavor_for_path("") == MacFlavor()


# --- macOS accessors ---

def test_mac_flags_false_off_macos_without_path_lookup(monkeypatch, fresh_mac_flavor, exe_lookups):
    calls, state = exe_lookups
    state["path"] = SYSEXT_PATH
    monkeypatch.setattr(sys, "platform", "linux")
    assert is_sandboxed_macos() is False
    assert is_mac_sys_ext() is False
    assert calls == []


def test_mac_sysext_detected_on_macos(monkeypatch, fresh_mac_flavor, exe_lookups):
    _, state = exe_lookups
    state["path"] = SYSEXT_PATH
    monkeypatch.setattr(sys, "platform", "darwin")
    assert is_mac_sys_ext() is True
    assert is_sandboxed_macos() is True


def test_mac_flavor_computed_once(monkeypatch, fresh_mac_flavor, exe_lookups):
    """The path is looked up once; later changes don't flip the cached flags."""
    calls, state = exe_lookups
    state["path"] = APP_STORE_PATH
    monkeypatch.setattr(sys, "platform", "darwin")
    assert is_sandboxed_macos() is True
    state["path"] = DAEMON_PATH
    for _ in range(5):
        assert is_sandboxed_macos() is True
        assert is_mac_sys_ext() is False
    assert len(calls) == 1


def test_unresolvable_executable_is_not_retried(monkeypatch, fresh_mac_flavor, exe_lookups):
    calls, state = exe_lookups
    monkeypatch.setattr(sys, "platform", "darwin")
    assert is_sandboxed_macos() is False
    state["path"] = SYSEXT_PATH
    assert is_mac_sys_ext() is False
    assert len(calls) == 1


# --- Windows ---

def test_gui_names_match_case_insensitively():
    assert is_windows_gui_name(r"C:\Program Files\Tailscale\tailscale-ipn.exe") is True
    assert is_windows_gui_name(r"C:\Program Files\Tailscale\Tailscale-IPN.EXE") is True
    assert is_windows_gui_name("tailscale-ipn") is True


def test_service_binary_is_not_gui():
    assert is_windows_gui_name(r"C:\Program Files\Tailscale\tailscaled.exe") is False


def test_empty_name_is_not_gui():
    assert is_windows_gui_name("") is False


def test_windows_gui_false_off_windows(monkeypatch, exe_lookups):
    calls, state = exe_lookups
    state["path"] = r"C:\Program Files\Tailscale\tailscale-ipn.exe"
    monkeypatch.setattr(sys, "platform", "linux")
    assert is_windows_gui() is False
    assert calls == []


def test_windows_gui_looks_up_path_every_call(monkeypatch, exe_lookups):
    calls, state = exe_lookups
    state["path"] = r"C:\Program Files\Tailscale\tailscale-ipn.exe"
    monkeypatch.setattr(sys, "platform", "win32")
    assert is_windows_gui() is True
    assert is_windows_gui() is True
    assert len(calls) == 2


def test_windows_gui_false_when_path_unresolvable(monkeypatch, exe_lookups):
    monkeypatch.setattr(sys, "platform", "win32")
    assert is_windows_gui() is False
