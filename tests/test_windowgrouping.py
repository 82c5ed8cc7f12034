"""Unit tests for window grouping and scalefactor band offsets."""

import numpy as np
import pytest

from tagparser.aacparser import AacSetup, ics_info
from tagparser.aacwindowgrouping import (window_grouping, ONLY_LONG_SEQUENCE, EIGHT_SHORT_SEQUENCE,
                                         NUM_SWB_1024_WINDOW, NUM_SWB_128_WINDOW)
from tagparser.tools.error import InvalidDataError


class TestWindowGrouping:
    """Test suite for window_grouping()."""

    def test_long_window(self, lc_setup):
        info = ics_info(Window_sequence=ONLY_LONG_SEQUENCE, Max_sfb=49)
        window_grouping(info, lc_setup)

        assert info.num_windows == 1
        assert info.num_window_groups == 1
        assert info.num_swb == 49
        assert info.swb_offset[0] == 0
        assert info.swb_offset[1] == 4
        assert info.swb_offset[49] == 1024
        assert np.array_equal(info.sect_sfb_offset[0, :50], info.swb_offset[:50])

    def test_pairs_of_short_windows(self, lc_setup):
        """A set bit joins the next window to the current group."""
        info = ics_info(Window_sequence=EIGHT_SHORT_SEQUENCE, Max_sfb=14, Scale_factor_grouping=0b1010101)
        window_grouping(info, lc_setup)

        assert info.num_windows == 8
        assert info.num_window_groups == 4
        assert list(info.window_group_length) == [2, 2, 2, 2, 0, 0, 0, 0]

    def test_cleared_bit_starts_a_group(self, lc_setup):
        info = ics_info(Window_sequence=EIGHT_SHORT_SEQUENCE, Max_sfb=14, Scale_factor_grouping=0b0101010)
        window_grouping(info, lc_setup)

        assert info.num_window_groups == 5
        assert list(info.window_group_length) == [1, 2, 2, 2, 1, 0, 0, 0]

    def test_short_section_offsets_scale_with_group_length(self, lc_setup):
        info = ics_info(Window_sequence=EIGHT_SHORT_SEQUENCE, Max_sfb=14, Scale_factor_grouping=0b1111111)
        window_grouping(info, lc_setup)

        assert info.num_window_groups == 1
        assert info.window_group_length[0] == 8
        assert info.swb_offset[info.num_swb] == 128
        assert info.sect_sfb_offset[0, 1] == 8 * (info.swb_offset[1] - info.swb_offset[0])
        assert info.sect_sfb_offset[0, info.num_swb] == 1024

    @pytest.mark.parametrize("sfi", range(12))
    def test_max_sfb_bounded_by_band_count(self, sfi):
        setup = AacSetup(sampling_frequency_index=sfi)
        window_grouping(ics_info(Max_sfb=NUM_SWB_1024_WINDOW[sfi]), setup)
        with pytest.raises(InvalidDataError):
            window_grouping(ics_info(Max_sfb=NUM_SWB_1024_WINDOW[sfi] + 1), setup)
        with pytest.raises(InvalidDataError):
            window_grouping(ics_info(Window_sequence=EIGHT_SHORT_SEQUENCE, Max_sfb=NUM_SWB_128_WINDOW[sfi] + 1), setup)

    def test_missing_table(self):
        """Low delay frames have no band table at 8 kHz."""
        setup = AacSetup(sampling_frequency_index=11, frame_length=512)
        with pytest.raises(InvalidDataError):
            window_grouping(ics_info(), setup)
