"""Unit tests for the SBR frequency band tables."""

import pytest

from tagparser.aacparser import AacSbrInfo, ID_SCE
from tagparser.parsers.aac_sbr_tables import derive_sbr_tables, get_sr_index, qmf_lower_boundary, qmf_upper_boundary
from tagparser.tools.error import InvalidDataError


@pytest.fixture
def sbr() -> AacSbrInfo:
    """SBR element of a 24 kHz core at 48 kHz output."""
    return AacSbrInfo(ID_SCE, 48000, 1024)


class TestSamplingRateIndex:
    @pytest.mark.parametrize("rate, index", [(96000, 0), (88200, 1), (48000, 3), (44100, 4), (22050, 7), (8000, 11)])
    def test_table_rates(self, rate, index):
        assert get_sr_index(rate) == index

    def test_nearest(self):
        assert get_sr_index(47000) == 3
        assert get_sr_index(1000) == 11


class TestSbrTables:
    """Test suite for derive_sbr_tables()."""

    def test_boundaries(self):
        assert qmf_lower_boundary(5, 3) == 13
        assert qmf_upper_boundary(9, 3, 13) == 45
        assert qmf_upper_boundary(14, 3, 13) == 26
        assert qmf_upper_boundary(15, 3, 13) == 39

    def test_two_region_master_table(self, sbr):
        derive_sbr_tables(sbr, 3, 5, 9, 2, 1, 0)

        assert (sbr.k0, sbr.k2) == (13, 45)
        assert sbr.N_master == 16
        assert sbr.f_master[0] == 13
        assert sbr.f_master[-1] == 45
        assert all(b > a for a, b in zip(sbr.f_master, sbr.f_master[1:]))
        assert (sbr.N_high, sbr.N_low) == (16, 8)
        assert sbr.n == [8, 16]
        assert sbr.k_x == 13
        assert sbr.M == 32
        assert sbr.N_Q == 4
        assert sbr.f_tablenoise[0] == sbr.f_tablelow[0]
        assert sbr.f_tablenoise[-1] == sbr.f_tablelow[-1]

    def test_xover_band(self, sbr):
        derive_sbr_tables(sbr, 3, 5, 9, 2, 1, 2)
        assert sbr.N_high == 14
        assert sbr.k_x == sbr.f_master[2]
        assert sbr.f_tablehigh == sbr.f_master[2:]

    def test_linear_master_table(self, sbr):
        derive_sbr_tables(sbr, 3, 5, 9, 0, 1, 0)
        assert sbr.N_master == 16
        assert sbr.f_master == list(range(13, 46, 2))

    def test_xover_out_of_range(self, sbr):
        with pytest.raises(InvalidDataError):
            derive_sbr_tables(sbr, 3, 5, 9, 2, 1, 7 + 16)

    def test_stop_below_start(self, sbr):
        with pytest.raises(InvalidDataError):
            derive_sbr_tables(sbr, 11, 15, 0, 2, 1, 0)
