"""
test_reload.py - live-reload 스크립트 테스트

DoD:
- watch 모드 없으면 빈 문자열
- WebSocket 주소: 오버라이드 > RenderOptions
- 메시지 처리: all → reload, css → link href 교체, view → patch
"""

import pytest

from src.domain.schemas import RenderOptions, ShellEnvironment
from src.render.reload import (
    hot_reload_js,
    live_reload_script,
    reload_address,
)


class TestProductionMode:
    """watch 모드가 아닐 때."""

    def test_empty_without_watch(self, render_options: RenderOptions, prod_env):
        assert live_reload_script(render_options, prod_env) == ""

    def test_empty_even_with_overrides(self, render_options: RenderOptions):
        """오버라이드만 있고 watch가 없으면 여전히 빈 문자열."""
        env = ShellEnvironment(external_hostname="dev.example.com", external_port="9999")

        assert live_reload_script(render_options, env) == ""

    def test_reads_os_environ_when_env_omitted(self, render_options: RenderOptions):
        assert live_reload_script(render_options) == ""


class TestWatchMode:
    """watch 모드일 때."""

    def test_default_address(self, render_options: RenderOptions, watch_env):
        """오버라이드 없으면 site host + reload_port."""
        script = live_reload_script(render_options, watch_env)

        assert "ws://127.0.0.1:3001/live_reload" in script

    def test_hostname_override(self, render_options: RenderOptions):
        env = ShellEnvironment(watch=True, external_hostname="dev.example.com")

        script = live_reload_script(render_options, env)

        assert "ws://dev.example.com:3001/live_reload" in script

    def test_port_override(self, render_options: RenderOptions):
        env = ShellEnvironment(watch=True, external_port="8443")

        script = live_reload_script(render_options, env)

        assert "ws://127.0.0.1:8443/live_reload" in script

    def test_both_overrides(self, render_options: RenderOptions):
        env = ShellEnvironment(
            watch=True, external_hostname="tunnel.local", external_port="80"
        )

        script = live_reload_script(render_options, env)

        assert "ws://tunnel.local:80/live_reload" in script
        assert "127.0.0.1" not in script

    def test_empty_port_override_is_used(self, render_options: RenderOptions):
        """빈 값으로 설정된 오버라이드도 설정된 것으로 취급."""
        env = ShellEnvironment(watch=True, external_port="")

        assert reload_address(render_options, env) == ("127.0.0.1", "")
        assert "ws://127.0.0.1:/live_reload" in live_reload_script(render_options, env)

    def test_empty_hostname_override_is_used(self, render_options: RenderOptions):
        env = ShellEnvironment(watch=True, external_hostname="")

        assert reload_address(render_options, env) == ("", "3001")

    def test_empty_override_from_environ(
        self, render_options: RenderOptions, monkeypatch: pytest.MonkeyPatch
    ):
        monkeypatch.setenv("HYDRATE_WATCH", "1")
        monkeypatch.setenv("HYDRATE_SITE_EXTERNAL_PORT", "")

        assert "ws://127.0.0.1:/live_reload" in live_reload_script(render_options)

    def test_ipv6_host_bracketed(self):
        options = RenderOptions(site_addr="[::1]:3000", reload_port=3001)

        script = live_reload_script(options, ShellEnvironment(watch=True))

        assert "ws://[::1]:3001/live_reload" in script

    def test_reads_os_environ_when_env_omitted(
        self, render_options: RenderOptions, monkeypatch: pytest.MonkeyPatch
    ):
        monkeypatch.setenv("HYDRATE_WATCH", "1")
        monkeypatch.setenv("HYDRATE_SITE_EXTERNAL_PORT", "4000")

        assert "ws://127.0.0.1:4000/live_reload" in live_reload_script(render_options)

    def test_script_block(self, render_options: RenderOptions, watch_env):
        script = live_reload_script(render_options, watch_env)

        assert script.startswith('<script crossorigin="">')
        assert script.endswith("</script>")
        assert script.count("<script") == 1

    def test_inlines_patch_helper(self, render_options: RenderOptions, watch_env):
        script = live_reload_script(render_options, watch_env)

        assert hot_reload_js() in script
        assert "function patch(view)" in script

    def test_message_handlers(self, render_options: RenderOptions, watch_env):
        """all / css / view 처리와 close 경고."""
        script = live_reload_script(render_options, watch_env)

        assert "if (msg.all)" in script
        assert "window.location.reload()" in script
        assert "msg.css" in script
        assert "'?version='" in script
        assert "CSS hot-reload: Could not find" in script
        assert "patch(msg.view)" in script
        assert "ws.onclose" in script
        assert "Live-reload stopped" in script
