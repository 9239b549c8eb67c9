import pytest

from annrigd.hits import EnergyDepositCollector, Hit


def test_deposits_accumulate_per_channel():
    collector = EnergyDepositCollector("calorimeter", 14)
    collector.begin_event()
    collector.add_deposit(3, 0.5)
    collector.add_deposit(3, 0.25)
    collector.add_deposit(0, 1.0)
    hits = collector.end_event()
    assert hits == [Hit(0, 1.0), Hit(3, 0.75)]
    assert collector.hits == hits


def test_zero_and_negative_channels_are_not_hits():
    collector = EnergyDepositCollector("BGOside", 24)
    collector.begin_event()
    collector.add_deposit(5, 0.0)
    assert collector.end_event() == []


def test_begin_event_resets():
    collector = EnergyDepositCollector("BGOtop", 16)
    collector.begin_event()
    collector.add_deposit(7, 2.0)
    collector.end_event()
    collector.begin_event()
    assert collector.hits == []
    collector.add_deposit(8, 1.5)
    assert collector.end_event() == [Hit(8, 1.5)]


@pytest.mark.parametrize("channel", [-1, 16, 100])
def test_out_of_range_channel(channel):
    collector = EnergyDepositCollector("BGOtop", 16)
    collector.begin_event()
    with pytest.raises(IndexError):
        collector.add_deposit(channel, 1.0)


def test_invalid_channel_count():
    with pytest.raises(ValueError):
        EnergyDepositCollector("calorimeter", 0)


def test_hit_text():
    assert str(Hit(2, 1.5)) == "Hit:2::1.5 MeV"