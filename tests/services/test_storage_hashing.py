import pytest

from sharecred.exceptions import HashingError, StorageError
from sharecred.services.hashing import hash_password, verify_password
from sharecred.services.storage import HashStore


def test_hash_is_self_describing_bcrypt():
    password_hash = hash_password("Abcdef1!", cost=4)

    assert password_hash.startswith(b"$2b$04$")
    assert verify_password("Abcdef1!", password_hash)
    assert not verify_password("Abcdef1?", password_hash)


def test_same_password_gets_fresh_salt():
    assert hash_password("Abcdef1!", cost=4) != hash_password("Abcdef1!", cost=4)


def test_invalid_cost_raises_hashing_error():
    with pytest.raises(HashingError):
        hash_password("Abcdef1!", cost=2)


def test_verify_against_garbage_is_false():
    assert verify_password("Abcdef1!", b"not a hash") is False


def test_ensure_user_dir_is_idempotent(tmp_path):
    store = HashStore(tmp_path)

    first = store.ensure_user_dir("neo")
    second = store.ensure_user_dir("neo")

    assert first == second == (tmp_path / "download" / "neo").absolute()
    assert first.is_dir()


def test_write_hash_writes_exact_bytes(tmp_path):
    store = HashStore(tmp_path)
    store.ensure_user_dir("neo")

    path = store.write_hash("neo", b"$2b$04$exactbytes")

    assert path.name == "hash.txt"
    assert path.read_bytes() == b"$2b$04$exactbytes"
    assert store.read_hash("neo") == b"$2b$04$exactbytes"


def test_write_without_directory_raises(tmp_path):
    with pytest.raises(StorageError):
        HashStore(tmp_path).write_hash("ghost", b"hash")


def test_read_missing_hash_raises(tmp_path):
    with pytest.raises(StorageError):
        HashStore(tmp_path).read_hash("ghost")


def test_default_base_dir_is_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert HashStore().user_dir("neo") == (tmp_path / "download" / "neo").absolute()
