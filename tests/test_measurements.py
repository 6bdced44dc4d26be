from dexa_convert.models.records import Measurement
from dexa_convert.parsing.measurements import group_measurements


def test_group_measurements_in_field_order():
    blocks = group_measurements([1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0])
    assert blocks == (
        Measurement(total=1.0, left=2.0, right=3.0, delta=4.0),
        Measurement(total=5.0, left=6.0, right=7.0, delta=8.0),
    )


def test_group_measurements_drops_remainder():
    assert len(group_measurements([1.0] * 9)) == 2
    assert group_measurements([1.0, 2.0, 3.0]) == ()
    assert group_measurements([]) == ()
