import pytest

from bazuka.hashing import sha3_hash
from bazuka.merkle import MerkleTree, merge_hash


def _leaves(values):
    return [sha3_hash(bytes([i])) for i in values]


def test_merkle_proof():
    tree = MerkleTree(_leaves(range(10)))
    root = tree.root()
    for i in range(10):
        curr = sha3_hash(bytes([i]))
        for entry in tree.prove(i):
            curr = merge_hash(curr, entry)
        assert curr == root


def test_empty_tree_root():
    assert MerkleTree([]).root() == bytes(32)


def test_single_leaf_root():
    assert MerkleTree(_leaves([1])).root() == bytes(
        [
            39, 103, 241, 92, 138, 242, 242, 199, 34, 93, 82, 115, 253, 214, 131, 237,
            199, 20, 17, 10, 152, 125, 16, 84, 105, 124, 52, 138, 237, 78, 108, 199,
        ]
    )


def test_two_leaf_root():
    assert MerkleTree(_leaves(range(2, 4))).root() == bytes(
        [
            147, 148, 62, 236, 12, 170, 57, 157, 174, 243, 124, 220, 81, 74, 187, 99,
            252, 243, 77, 85, 3, 93, 223, 166, 184, 93, 190, 149, 217, 73, 107, 7,
        ]
    )


def test_ten_leaf_root():
    assert MerkleTree(_leaves(range(10))).root() == bytes(
        [
            170, 152, 247, 242, 8, 76, 139, 70, 132, 168, 19, 116, 29, 8, 9, 42,
            0, 85, 164, 237, 192, 106, 123, 174, 180, 217, 32, 126, 18, 38, 210, 79,
        ]
    )


def test_sixteen_leaf_root():
    assert MerkleTree(_leaves(range(16))).root() == bytes(
        [
            205, 127, 119, 130, 101, 244, 191, 81, 239, 175, 89, 0, 91, 183, 65, 61,
            170, 6, 253, 155, 249, 90, 186, 20, 71, 105, 83, 24, 118, 68, 70, 119,
        ]
    )


@pytest.mark.parametrize("count", [1, 2, 3, 5, 8, 10, 16])
def test_num_leaves_and_proof_length(count):
    tree = MerkleTree(_leaves(range(count)))
    assert tree.num_leaves() == count
    for i in range(count):
        assert len(tree.prove(i)) in (tree.depth(), tree.depth() + 1)


def test_merge_hash_is_symmetric():
    a, b = _leaves([1, 2])
    assert merge_hash(a, b) == merge_hash(b, a)


def test_prove_out_of_range():
    tree = MerkleTree(_leaves(range(4)))
    with pytest.raises(IndexError):
        tree.prove(4)