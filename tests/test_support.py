import io
import logging

import pytest

from simple_predicates import And, Or
from simple_predicates.normalform import ClauseList, dnf_extraction
from simple_predicates.normalform.extraction import delta_time_formatter, logger
from simple_predicates.support.logging import DeltaTimeFormatter, format_delta, Timer

from conftest import v


@pytest.mark.parametrize('seconds, expected', [
    (0.0, '0:00:00.000'),
    (2.0, '0:00:02.000'),
    (59.9996, '0:01:00.000'),
    (36000.25, '10:00:00.250'),
])
def test_format_delta(seconds, expected):
    assert format_delta(seconds) == expected


def test_formatter_uses_timer():
    timer = Timer()
    formatter = DeltaTimeFormatter('%(delta)s %(message)s', timer=timer)
    record = logging.LogRecord('demo', logging.INFO, __file__, 1, 'hello', None, None)
    timer.reference_time = record.created - 12.0
    assert formatter.format(record) == '0:00:12.000 hello'


def test_extraction_log_is_relative_to_call():
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(delta_time_formatter)
    logger.addHandler(handler)
    try:
        dnf_extraction(And(v(1), Or(v(2), v(3))), ClauseList(), log_level=logging.DEBUG)
    finally:
        logger.removeHandler(handler)
    lines = stream.getvalue().splitlines()
    assert any('clause' in line for line in lines)
    assert lines[-1].endswith('finished after 3 steps with 2 clauses')
    assert all(line.split(' - ')[3].startswith('0:00:0') for line in lines)
