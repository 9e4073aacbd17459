from __future__ import annotations

from pathlib import Path

from walletfy.workspace import Workspace


class DescribeWorkspace:
    class DescribeResolve:
        def it_should_use_explicit_path_when_provided(self):
            ws = Workspace.resolve(explicit=Path("/tmp/my-wallet"))
            assert ws.root == Path("/tmp/my-wallet")

        def it_should_use_walletfy_data_env_var_when_set(self, monkeypatch):
            monkeypatch.setenv("WALLETFY_DATA", "/tmp/env-wallet")
            ws = Workspace.resolve()
            assert ws.root == Path("/tmp/env-wallet")

        def it_should_prefer_explicit_over_env_var(self, monkeypatch):
            monkeypatch.setenv("WALLETFY_DATA", "/tmp/env-wallet")
            ws = Workspace.resolve(explicit=Path("/tmp/explicit"))
            assert ws.root == Path("/tmp/explicit")

        def it_should_fall_back_to_cwd_when_no_env_var(self, monkeypatch):
            monkeypatch.delenv("WALLETFY_DATA", raising=False)
            ws = Workspace.resolve()
            assert ws.root == Path.cwd()

    class DescribePaths:
        def it_should_compute_store_path(self):
            ws = Workspace(root=Path("/data"))
            assert ws.store_path == Path("/data/data/walletfy.db")

        def it_should_compute_settings_path(self):
            ws = Workspace(root=Path("/data"))
            assert ws.settings_path == Path("/data/config/settings.yml")
