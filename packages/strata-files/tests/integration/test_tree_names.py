from strata.files import Directory, File, RootNode
from strata.names import StringName, name_from_string


def test_full_names_work_as_lookup_keys():
    # 1. Arrange: a small tree with two files of the same base name
    root = RootNode()
    etc = Directory("etc", root)
    conf_d = Directory("conf.d", etc)
    File("hosts", etc)
    File("hosts", conf_d)

    # 2. Act: index every match by its full name
    index = {node.get_full_name(): node for node in root.find_nodes("hosts")}

    # 3. Assert: names parsed from text find the same entries
    assert len(index) == 2
    assert index[StringName("etc/hosts", "/")].get_parent_node() is etc
    assert index[name_from_string("etc/conf.d/hosts", "/")].get_parent_node() is conf_d


def test_data_strings_of_full_names_are_unambiguous():
    root = RootNode()
    a_b = Directory("a.b", root)
    a = Directory("a", root)
    b = Directory("b", a)
    first = File("c", a_b)
    second = File("c", b)

    # Both render as "a.b/c" vs "a/b/c" for humans, but the canonical data
    # strings keep a dotted base name distinct from a nested path.
    assert first.get_full_name().as_data_string() == "a\\.b.c"
    assert second.get_full_name().as_data_string() == "a.b.c"
    assert not first.get_full_name().is_equal(second.get_full_name())
