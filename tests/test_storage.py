"""
Record Storage Tests
====================
"""

import numpy as np
import pytest

from foveated_pano.optimizer.core import decode, encode
from foveated_pano.storage.record_io import (
    FORMAT_VERSION,
    RecordFormatError,
    load_record,
    save_record,
)


class TestRecordStorage:
    """Tests for saving and loading records."""

    def test_save_and_load(self, tmp_path, color_frame):
        record = encode(color_frame, 0, 90)
        path = tmp_path / "record.npz"

        save_record(path, record)
        loaded = load_record(path)

        assert loaded.full_size == record.full_size
        assert loaded.left_buffer == record.left_buffer
        assert loaded.blur_factor == record.blur_factor
        assert loaded.orig_h_size == record.orig_h_size
        assert loaded.orig_v_size == record.orig_v_size
        for name, image in record.buffers().items():
            assert np.array_equal(getattr(loaded, name), image)
        assert np.array_equal(decode(loaded), decode(record))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_record(tmp_path / "missing.npz")

    def test_missing_fields(self, tmp_path):
        path = tmp_path / "partial.npz"
        np.savez(str(path), focused=np.zeros((2, 2), dtype=np.uint8))
        with pytest.raises(RecordFormatError, match="missing"):
            load_record(path)

    def test_wrong_version(self, tmp_path, make_record):
        path = tmp_path / "record.npz"
        save_record(path, make_record())

        with np.load(str(path)) as archive:
            contents = {key: archive[key] for key in archive.files}
        contents["meta"] = contents["meta"].copy()
        contents["meta"][0] = FORMAT_VERSION + 1
        np.savez(str(path), **contents)

        with pytest.raises(RecordFormatError, match="version"):
            load_record(path)

    def test_tampered_metadata_fails_validation(self, tmp_path, make_record):
        path = tmp_path / "record.npz"
        save_record(path, make_record())

        with np.load(str(path)) as archive:
            contents = {key: archive[key] for key in archive.files}
        contents["meta"] = contents["meta"].copy()
        contents["meta"][3] = 60  # left_buffer == full width
        np.savez(str(path), **contents)

        with pytest.raises(RecordFormatError, match="left_buffer") as excinfo:
            load_record(path)
        assert isinstance(excinfo.value.__cause__, ValueError)

    def test_tampered_blur_factor_fails_validation(self, tmp_path, make_record):
        path = tmp_path / "record.npz"
        save_record(path, make_record())

        with np.load(str(path)) as archive:
            contents = {key: archive[key] for key in archive.files}
        contents["meta"] = contents["meta"].copy()
        contents["meta"][4] = 4  # bands were downsampled by 2
        np.savez(str(path), **contents)

        with pytest.raises(RecordFormatError, match="downsampled by 4"):
            load_record(path)
