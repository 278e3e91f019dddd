import json

import pytest

from packwiz.mrexport import (
    Pack,
    PackFile,
    can_be_included_directly,
    file_env,
    override_folder,
    pack_dependencies,
    sort_files,
)


@pytest.mark.parametrize(
    "mode, url, restrict, expected",
    [
        ("url", "https://cdn.modrinth.com/data/x/file.jar", True, True),
        ("", "https://github.com/a/b/releases/file.jar", True, True),
        ("url", "https://files.example.com/file.jar", True, False),
        ("url", "https://files.example.com/file.jar", False, True),
        ("metadata:curseforge", "https://cdn.modrinth.com/x.jar", False, False),
    ],
)
def test_can_be_included_directly(mode, url, restrict, expected):
    assert can_be_included_directly(mode, url, restrict) is expected


@pytest.mark.parametrize(
    "side, optional, expected",
    [
        ("both", False, ("required", "required")),
        ("", True, ("optional", "optional")),
        ("client", False, ("required", "unsupported")),
        ("server", True, ("unsupported", "optional")),
    ],
)
def test_file_env(side, optional, expected):
    assert file_env(side, optional) == expected


def test_override_folder():
    assert override_folder("client") == "client-overrides"
    assert override_folder("server") == "server-overrides"
    assert override_folder("both") == "overrides"


def test_pack_dependencies_prefers_quilt():
    deps = pack_dependencies({"quilt": "0.19", "fabric": "0.14", "minecraft": "1.19.2"}, "1.19.2")
    assert deps == {"minecraft": "1.19.2", "quilt-loader": "0.19"}


def test_pack_dependencies_forge():
    assert pack_dependencies({"forge": "43.1.1"}, "1.19.2") == {"minecraft": "1.19.2", "forge": "43.1.1"}


def test_sort_files():
    files = [PackFile("mods/b.jar"), PackFile("mods/a.jar")]
    assert [f.path for f in sort_files(files)] == ["mods/a.jar", "mods/b.jar"]


def test_pack_json_round_trip():
    file = PackFile(
        path="mods/a.jar",
        hashes={"sha512": "bb", "sha1": "aa"},
        env=("required", "unsupported"),
        downloads=["https://cdn.modrinth.com/a.jar"],
        file_size=42,
    )
    pack = Pack(version_id="1.0", name="Pack", files=[file], dependencies={"minecraft": "1.19.2"})
    data = json.loads(pack.to_json())
    assert data == pack.to_dict()
    assert data["formatVersion"] == 1
    assert data["game"] == "minecraft"
    assert data["files"][0]["fileSize"] == 42
    assert data["files"][0]["env"] == {"client": "required", "server": "unsupported"}
    assert list(data["files"][0]["hashes"]) == ["sha1", "sha512"]


def test_summary_omitted_when_empty():
    assert "summary" not in Pack(version_id="1", name="P").to_dict()
    assert Pack(version_id="1", name="P", summary="s").to_dict()["summary"] == "s"


def test_json_layout_and_escaping():
    text = Pack(version_id="1", name="<Pack>").to_json()
    assert text.endswith("}\n")
    assert '\n    "formatVersion": 1,' in text
    assert "\\u003cPack\\u003e" in text
    assert json.loads(text)["name"] == "<Pack>"