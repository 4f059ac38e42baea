"""
OptimizedImage Record Tests
===========================
"""

import numpy as np
import pytest

from foveated_pano.models.size import ImageSize


class TestRecordConstruction:
    """Tests for record invariants."""

    def test_valid_record(self, make_record):
        record = make_record()
        assert record.window_width == 30
        assert record.left_buffer == 10

    def test_owns_read_only_copies(self, make_record):
        focused = np.full((10, 6), 200, dtype=np.uint8)
        record = make_record(focused=focused)

        focused[:] = 0
        assert np.all(record.focused == 200)
        with pytest.raises(ValueError):
            record.focused[0, 0] = 1

    def test_is_frozen(self, make_record):
        record = make_record()
        with pytest.raises(AttributeError):
            record.left_buffer = 3

    @pytest.mark.parametrize("left_buffer", [-1, 60, 100])
    def test_left_buffer_out_of_range(self, make_record, left_buffer):
        with pytest.raises(ValueError, match="left_buffer"):
            make_record(left_buffer=left_buffer)

    def test_empty_buffer_rejected(self, make_record):
        with pytest.raises(ValueError):
            make_record(blurred_top=np.zeros((0, 3), dtype=np.uint8))

    def test_dtype_mismatch_rejected(self, make_record):
        with pytest.raises(ValueError, match="dtype"):
            make_record(blurred_left=np.zeros((15, 6), dtype=np.float32))

    def test_channel_mismatch_rejected(self, make_record):
        with pytest.raises(ValueError, match="channel"):
            make_record(blurred_left=np.zeros((15, 6, 3), dtype=np.uint8))

    def test_vertical_spans_must_equal_full_height(self, make_record):
        with pytest.raises(ValueError, match="full height"):
            make_record(orig_v_size=(ImageSize(6, 10), ImageSize(6, 11)))

    def test_window_wider_than_frame_rejected(self, make_record):
        with pytest.raises(ValueError, match="exceeds"):
            make_record(
                orig_h_size=(ImageSize(40, 30), ImageSize(40, 30)),
            )

    def test_band_larger_than_original_rejected(self, make_record):
        with pytest.raises(ValueError, match="blurred_left"):
            make_record(blurred_left=np.zeros((15, 13), dtype=np.uint8))

    def test_band_size_must_match_blur_factor(self, make_record):
        # 12x30 left band downsampled by 2 is 6x15, not 4x10
        with pytest.raises(ValueError, match="downsampled by 2"):
            make_record(blurred_left=np.zeros((10, 4), dtype=np.uint8))

    def test_bands_checked_against_stored_factor(self, make_record):
        # Bands are 12x30 / 2; claiming factor 3 leaves them oversized
        with pytest.raises(ValueError, match="downsampled by 3"):
            make_record(blur_factor=3)

    @pytest.mark.parametrize("blur_factor", [0, -2])
    def test_non_positive_blur_factor_rejected(self, make_record, blur_factor):
        with pytest.raises(ValueError, match="blur_factor"):
            make_record(blur_factor=blur_factor)


class TestRecordSizeAccounting:
    """Tests for footprint reporting."""

    def test_nbytes_sums_all_buffers(self, make_record):
        record = make_record()
        assert record.nbytes == 60 + 90 + 90 + 15 + 15

    def test_original_nbytes(self, make_record):
        assert make_record().original_nbytes == 60 * 30

    def test_compression_ratio(self, make_record):
        record = make_record()
        assert record.compression_ratio == pytest.approx(270 / 1800)

    def test_to_dict_has_no_pixels(self, make_record):
        meta = make_record().to_dict()
        assert meta["full_size"] == [60, 30]
        assert meta["left_buffer"] == 10
        assert meta["blur_factor"] == 2
        assert meta["orig_top"] == [6, 10]
        assert "blurred_left" not in meta
