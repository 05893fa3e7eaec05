from edline.files import create_file


def test_invalid_descriptor_gives_none():
    assert create_file(-1, None) is None


def test_new_file_starts_empty():
    node = create_file(1, None)
    assert node.fd == 1
    assert node.prev is None
    assert node.next is None
    assert list(node.buffer_tree.nodes()) == []


def test_files_are_linked_both_ways():
    first = create_file(1, None)
    second = create_file(2, first)
    third = create_file(3, second)
    assert second.prev is first
    assert first.next is second
    assert third.prev is second
    assert [n.fd for n in first] == [1, 2, 3]
    assert [n.fd for n in second] == [2, 3]


def test_each_file_has_its_own_tree():
    first = create_file(1, None)
    second = create_file(2, first)
    assert first.buffer_tree is not second.buffer_tree
    assert list(second.buffer_tree.nodes()) == list(first.buffer_tree.nodes())