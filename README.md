# bazuka

Building blocks for a zero-knowledge blockchain node, written in pure Python.

## Modules

- `bazuka.money` has the `Money` amount type. The value is an unsigned 64-bit count of the smallest unit, and one whole unit equals 10^9 of them. `Money.parse` reads decimal text such as `"123.456"` and raises `ParseMoneyError` on bad input. `str()` shows the amount in whole units followed by the currency symbol. Money supports `+`, `-` and `//` by an integer.
- `bazuka.hashing` has `sha3_hash`, which returns the 32-byte SHA3-256 digest.
- `bazuka.merkle` has `MerkleTree`, built from a list of leaf hashes, with `root()`, `depth()`, `num_leaves()` and `prove(leaf)`. It also has `merge_hash`, which hashes two nodes with the smaller one first.
- `bazuka.ed25519` handles Ed25519 signing. `generate_keys(seed)` derives a key pair from any seed bytes. It also has `sign` and `verify`, and the `PublicKey`, `PrivateKey` and `Signature` types. A `PublicKey` is written as `0x` followed by 64 hex digits, with the most significant byte first. `PublicKey.parse` raises `ParsePublicKeyError` on bad input.
- `bazuka.address` has three types:
  - `Address`, which is either the treasury (`Address.treasury()`) or a public key. `Address.parse` raises `ParseAddressError` on bad input.
  - `Account`, which holds a balance and a nonce.
  - `ContractId`, a 32-byte digest written as hex. `ContractId.parse` raises `ParseContractIdError` on bad input.
- `bazuka.jubjub` has points of the JubJub twisted Edwards curve:
  - `PointAffine`, with addition, doubling, scalar multiplication and compression.
  - `PointProjective`.
  - `PointCompressed`, with decompression.
  - The constants `BASE`, `BASE_COFACTOR`, `ORDER`, `A` and `D`.
  - A `PublicKey` written as `0x2` or `0x3` followed by 64 hex digits.
- `bazuka.kvstore` has the `KvStore` interface, with `get`, `update`, `pairs`, `checksum` and `mirror`. Two stores implement it:
  - `RamKvStore`, which keeps everything in memory.
  - `RamMirrorKvStore`, which records writes over another store. `to_ops()` turns those writes into write operations, and `rollback()` gives the operations that restore the underlying values.
  
  Write operations are `Put(key, value)` and `Remove(key)`.
- `bazuka.keys` has functions that build database key names, such as `block(index)`, `account(address)`, `contract(contract_id)` and `local_value(contract_id, locator, is_scalar)`.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Examples

```python
from bazuka.money import Money

amount = Money.parse("1.5")
print(amount)
```

```python
from bazuka import ed25519

seed = b"placeholder"
keys = ed25519.generate_keys(seed)
public_key, private_key = keys
signature = ed25519.sign(private_key, b"hello")
assert ed25519.verify(public_key, b"hello", signature)
```

```python
from bazuka.hashing import sha3_hash
from bazuka.merkle import MerkleTree

tree = MerkleTree([sha3_hash(bytes([i])) for i in range(10)])
root = tree.root()
proof = tree.prove(3)
```

```python
from bazuka.kvstore import Put, RamKvStore

store = RamKvStore()
store.update([Put("aa", b"\x03\x02\x01\x00")])
mirror = store.mirror()
mirror.update([Put("bb", b"\x01")])
store.update(mirror.to_ops())
```

## What this package does not do

This package is a library of primitives. It has no node, no network client or server, and no command-line program. It does not store data on disk: the only stores are in memory. It does not build blocks or transactions. It also does not sign with JubJub keys. The `jubjub` module provides curve arithmetic and the public-key format only.

## Running the tests

```
pytest
```