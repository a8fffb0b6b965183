"""Tests for default config construction — paths, identity, passthrough."""

from __future__ import annotations

import os
from pathlib import Path

from bzzconfig.core.config_builder import (
    build_default_config,
    derive_vod_path,
    node_directory,
)
from bzzconfig.models import (
    DEFAULT_PORT,
    ENS_ROOT_ADDRESS,
    ChunkerParams,
    HiveParams,
    StoreParams,
    SyncParams,
)


class TestNodeDirectory:
    def test_directory_named_after_fingerprint(self, identity):
        assert node_directory("/data/nodes", identity) == (
            f"/data/nodes/bzz-{identity.fingerprint_hex}"
        )

    def test_trailing_slash_and_pathlib(self, identity):
        expected = f"/data/nodes/bzz-{identity.fingerprint_hex}"
        assert node_directory("/data/nodes/", identity) == expected
        assert node_directory(Path("/data/nodes"), identity) == expected

    def test_relative_base_made_absolute(self, identity, tmp_dir, monkeypatch):
        monkeypatch.chdir(tmp_dir)
        directory = node_directory("nodes", identity)
        assert os.path.isabs(directory)
        assert directory == str(tmp_dir / "nodes" / f"bzz-{identity.fingerprint_hex}")


class TestVodPath:
    def test_substitutes_known_segment(self):
        assert derive_vod_path("/home/u/.livepeernet/livepeer") == "/home/u/.vod"

    def test_replaces_every_occurrence(self):
        assert (
            derive_vod_path("/livepeernet/livepeer/livepeernet/livepeer")
            == "/vod/vod"
        )

    def test_unrelated_path_unchanged(self):
        assert derive_vod_path("/data/nodes") == "/data/nodes"


class TestBuildDefaultConfig:
    def test_identity_fields(self, make_config, identity):
        config = make_config()
        assert config.public_key == identity.public_key_hex
        assert config.bzz_key == identity.bzz_key

    def test_collaborator_defaults_use_node_directory(self, make_config):
        config = make_config()
        assert config.store == StoreParams.new_default(config.path)
        assert config.chunker == ChunkerParams.new_default(config.path)
        assert config.hive == HiveParams.new_default(config.path)
        assert config.sync == SyncParams.new_default(config.path)

    def test_swap_defaults(self, make_config, identity):
        config = make_config(contract="0x" + "ab" * 20)
        assert config.swap.contract == "0x" + "ab" * 20
        assert config.swap.beneficiary == identity.address_hex
        assert config.swap.private_key is None

    def test_network_and_constants(self, make_config):
        config = make_config(network_id=7)
        assert config.network_id == 7
        assert config.ens_root == ENS_ROOT_ADDRESS
        assert config.port == DEFAULT_PORT == "8500"

    def test_passthrough_verbatim(self, make_config):
        config = make_config(rtmp_port="19350", ffmpeg_path="/opt/ff mpeg")
        assert config.rtmp_port == "19350"
        assert config.ffmpeg_path == "/opt/ff mpeg"

    def test_vod_path_from_base_path(self, identity):
        config = build_default_config(
            "/srv/livepeernet/livepeer",
            identity,
            contract="0x" + "00" * 20,
            network_id=1,
        )
        assert config.vod_path == "/srv/vod"
        assert config.path == f"/srv/livepeernet/livepeer/bzz-{identity.fingerprint_hex}"

    def test_no_filesystem_access(self, base_path, make_config):
        make_config()
        assert not base_path.exists()
