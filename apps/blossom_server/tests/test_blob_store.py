from blossom_core.models import BlobMeta, compute_hash
from blossom_server.adapters import LocalBlobStore


def test_put_writes_payload_and_sidecar(tmp_path) -> None:
    store = LocalBlobStore(str(tmp_path))
    meta = store.put(b"%PDF-1.7\ndocument")

    assert meta.hash == compute_hash(b"%PDF-1.7\ndocument")
    assert meta.media_type == "application/pdf"
    assert meta.size == 17
    assert (tmp_path / meta.hash.hex()).read_bytes() == b"%PDF-1.7\ndocument"
    assert BlobMeta.model_validate_json((tmp_path / f"{meta.hash.hex()}.json").read_text()) == meta


def test_open_and_meta_round_trip(tmp_path) -> None:
    store = LocalBlobStore(str(tmp_path))
    meta = store.put(b"content")

    with store.open(meta.hash) as handle:
        assert handle.read() == b"content"
    assert store.meta(meta.hash) == meta


def test_unknown_hash(tmp_path) -> None:
    store = LocalBlobStore(str(tmp_path))
    missing = compute_hash(b"nothing")

    assert store.open(missing) is None
    assert store.meta(missing) is None


def test_meta_without_sidecar_is_derived(tmp_path) -> None:
    store = LocalBlobStore(str(tmp_path))
    data = b"GIF89a\x01\x00\x01\x00"
    blob_hash = compute_hash(data)
    (tmp_path / blob_hash.hex()).write_bytes(data)

    meta = store.meta(blob_hash)

    assert meta is not None
    assert meta.media_type == "image/gif"
    assert meta.size == len(data)


def test_corrupt_sidecar_falls_back(tmp_path) -> None:
    store = LocalBlobStore(str(tmp_path))
    meta = store.put(b"plain")
    (tmp_path / f"{meta.hash.hex()}.json").write_text('{"hash": "short"}')

    derived = store.meta(meta.hash)

    assert derived is not None
    assert derived.size == 5
    assert derived.media_type == "text/plain"


def test_local_store_is_a_blob_source(tmp_path) -> None:
    from blossom_core.ports import BlobSource

    assert isinstance(LocalBlobStore(str(tmp_path)), BlobSource)
