import pytest

from errors import NoVictimAvailableError
from page_table import PageTable
from policies import FIFOPolicy, LFUPolicy, LRUPolicy, get_policy


def make_table():
    # page: (frame, arrival, last access, reference count)
    table = PageTable(5)
    for page, (frame, arrival, last_access, refs) in {
        0: (10, 4, 9, 3),
        1: (11, 2, 5, 1),
        3: (12, 3, 3, 1),
        4: (13, 1, 8, 2),
    }.items():
        table.load(page, frame, now=arrival)
        entry = table.get_entry(page)
        entry.resident.last_access_time = last_access
        entry.resident.reference_count = refs
    return table


def test_fifo_picks_earliest_arrival():
    assert FIFOPolicy().select_victim(make_table()).virtual_page_num == 4


def test_lru_picks_least_recent_access():
    assert LRUPolicy().select_victim(make_table()).virtual_page_num == 3


def test_lfu_breaks_count_tie_by_arrival():
    # Pages 1 and 3 share the lowest count; page 1 arrived first
    assert LFUPolicy().select_victim(make_table()).virtual_page_num == 1


def test_lfu_tie_break_ignores_scan_order():
    table = PageTable(4)
    table.load(1, frame=0, now=5)
    table.load(2, frame=1, now=2)
    table.load(3, frame=2, now=7)
    table.get_entry(3).touch(8)
    assert LFUPolicy().select_victim(table).virtual_page_num == 2


def test_first_scanned_wins_ties():
    table = PageTable(3)
    table.load(2, frame=0, now=1)
    table.load(0, frame=1, now=1)
    assert FIFOPolicy().select_victim(table).virtual_page_num == 0


@pytest.mark.parametrize('policy', [FIFOPolicy(), LRUPolicy(), LFUPolicy()])
def test_empty_table_has_no_victim(policy):
    with pytest.raises(NoVictimAvailableError) as excinfo:
        policy.select_victim(PageTable(3), page_number=1)
    assert excinfo.value.policy == policy.name


@pytest.mark.parametrize('name, cls', [('FIFO', FIFOPolicy), ('lru', LRUPolicy), ('Lfu', LFUPolicy)])
def test_get_policy_by_name(name, cls):
    assert isinstance(get_policy(name), cls)


def test_get_policy_passes_instances_through():
    policy = LRUPolicy()
    assert get_policy(policy) is policy


@pytest.mark.parametrize('name', ['RAND', '', None])
def test_get_policy_unknown(name):
    with pytest.raises(ValueError, match='Unknown algorithm'):
        get_policy(name)
