import pytest

from packwiz.cffiles import (
    FileInfo,
    GameVersionFile,
    ModInfo,
    ModloaderType,
    filter_file_info_loader_index,
    filter_loader_type_index,
    find_latest_file,
    get_search_loader_type,
    highest_slice_index,
    project_url,
)


def test_highest_slice_index():
    assert highest_slice_index(["1.18", "1.19", "1.20"], ["1.18", "1.19"]) == 1
    assert highest_slice_index(["1.18", "1.19"], ["1.17"]) == -1
    assert highest_slice_index(["a"], []) == -1


@pytest.mark.parametrize(
    "versions, expected",
    [
        ({"minecraft": "1.19", "fabric": "0.14"}, ModloaderType.FABRIC),
        ({"minecraft": "1.19", "forge": "43"}, ModloaderType.FORGE),
        ({"fabric": "x", "quilt": "y"}, ModloaderType.ANY),
        ({"forge": "x", "neoforge": "y"}, ModloaderType.ANY),
        ({"quilt": "y"}, ModloaderType.ANY),
        ({}, ModloaderType.ANY),
    ],
)
def test_get_search_loader_type(versions, expected):
    assert get_search_loader_type(versions) is expected


def test_filter_loader_type_index():
    assert filter_loader_type_index([], ModloaderType.FORGE) == (ModloaderType.ANY, True)
    assert filter_loader_type_index(["forge"], ModloaderType.ANY) == (ModloaderType.ANY, True)
    assert filter_loader_type_index(["forge"], ModloaderType.FORGE) == (ModloaderType.FORGE, True)
    assert filter_loader_type_index(["forge"], ModloaderType.FABRIC) == (ModloaderType.ANY, False)
    assert filter_loader_type_index(["forge"], 99) == (ModloaderType.ANY, False)


def test_filter_file_info_loader_index_prefers_later_loader():
    info = FileInfo(id=1, game_versions=["1.19", "Fabric", "Quilt"])
    assert filter_file_info_loader_index(["fabric", "quilt"], info) == (ModloaderType.QUILT, True)
    assert filter_file_info_loader_index(["fabric"], info) == (ModloaderType.FABRIC, True)
    assert filter_file_info_loader_index(["forge"], info) == (ModloaderType.ANY, False)
    assert filter_file_info_loader_index([], info) == (ModloaderType.ANY, True)


def test_find_latest_file_prefers_later_game_version():
    newer = FileInfo(id=5, file_name="b.jar", game_versions=["1.19", "Fabric"])
    older = FileInfo(id=10, file_name="a.jar", game_versions=["1.18.2", "Fabric"])
    mod = ModInfo(id=1, latest_files=[older, newer])
    file_id, info, name = find_latest_file(mod, ["1.18.2", "1.19"], ["fabric"])
    assert (file_id, info, name) == (5, newer, "b.jar")


def test_find_latest_file_prefers_quilt_over_fabric():
    fabric = FileInfo(id=20, file_name="fabric.jar", game_versions=["1.19", "Fabric"])
    quilt = FileInfo(id=10, file_name="quilt.jar", game_versions=["1.19", "Quilt"])
    mod = ModInfo(id=1, latest_files=[fabric, quilt])
    assert find_latest_file(mod, ["1.19"], ["fabric", "quilt"]) == (10, quilt, "quilt.jar")


def test_find_latest_file_breaks_ties_by_id():
    low = FileInfo(id=3, file_name="low.jar", game_versions=["1.19"])
    high = FileInfo(id=7, file_name="high.jar", game_versions=["1.19"])
    mod = ModInfo(id=1, latest_files=[high, low])
    assert find_latest_file(mod, ["1.19"], []) == (7, high, "high.jar")


def test_find_latest_file_no_match():
    mod = ModInfo(id=1, latest_files=[FileInfo(id=3, game_versions=["1.12"])])
    assert find_latest_file(mod, ["1.19"], ["forge"]) == (0, None, "")


def test_find_latest_file_from_game_version_files():
    entry = GameVersionFile(id=42, name="mod.jar", game_version="1.19", modloader=ModloaderType.FORGE)
    skipped = GameVersionFile(id=99, name="fab.jar", game_version="1.19", modloader=ModloaderType.FABRIC)
    mod = ModInfo(id=1, game_version_latest_files=[entry, skipped])
    assert find_latest_file(mod, ["1.19"], ["forge"]) == (42, None, "mod.jar")


def test_game_version_files_use_curseforge_snapshot_names():
    entry = GameVersionFile(id=8, name="snap.jar", game_version="1.19-Snapshot")
    mod = ModInfo(id=1, game_version_latest_files=[entry])
    assert find_latest_file(mod, ["22w11a"], []) == (8, None, "snap.jar")


def test_project_url():
    assert project_url(238222) == "https://www.curseforge.com/projects/238222"