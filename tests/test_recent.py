from langkeys.recent import RECENT_DIRECTORIES_KEY, MemoryStore, RecentDirectories, YamlFileStore


def test_add_moves_to_front_and_trims():
    recent = RecentDirectories(MemoryStore(), max_items=3)
    for directory in ("/a", "/b", "/c", "/b", "/d"):
        recent.add(directory)
    assert recent.items() == ["/d", "/b", "/c"]


def test_empty_directory_is_ignored():
    recent = RecentDirectories(MemoryStore())
    recent.add("/a")
    assert recent.add("") == ["/a"]


def test_corrupt_store_value():
    store = MemoryStore()
    store.set(RECENT_DIRECTORIES_KEY, "not a list")
    assert RecentDirectories(store).items() == []
    store.set(RECENT_DIRECTORIES_KEY, ["/a", "", None, 3, "/b"])
    assert RecentDirectories(store).items() == ["/a", "/b"]


def test_clear():
    recent = RecentDirectories(MemoryStore())
    recent.add("/a")
    recent.clear()
    assert recent.items() == []


def test_yaml_file_store_persists(tmp_path):
    path = tmp_path / "state" / "recent.yml"
    RecentDirectories(YamlFileStore(str(path))).add("/lang")
    assert path.exists()
    assert RecentDirectories(YamlFileStore(str(path))).items() == ["/lang"]


def test_yaml_file_store_ignores_broken_file(tmp_path):
    path = tmp_path / "recent.yml"
    path.write_text("recentDirectories: [unclosed", "utf-8")
    assert YamlFileStore(str(path)).get(RECENT_DIRECTORIES_KEY) is None


def test_yaml_file_store_unusable_path(tmp_path):
    path = tmp_path / "recent.yml"
    path.mkdir()
    store = YamlFileStore(str(path))
    assert store.get(RECENT_DIRECTORIES_KEY) is None
    recent = RecentDirectories(store)
    assert recent.add("/lang") == ["/lang"]
    assert recent.items() == []
