# Configuration for the tests.
# Use `py.test` to run the tests.

# (This file needs to be in or above the directory where py.test is called)

import pytest
import os

def pytest_addoption(parser):
    group = parser.getgroup("pbirch")
    group.addoption("--csv-dir", action="store", default=None,
        help="Directory holding the Veekun CSV files (if not specified, $PBIRCH_CSV_DIR and then pbirch/data/csv are tried; tests needing them are skipped otherwise)")
    group.addoption("--all", action="store_true", default=False,
        help="Run all tests, even those that take a lot of time")

def pytest_configure(config):
    config.addinivalue_line("markers", "slow: loads the complete Veekun data")

def pytest_runtest_setup(item):
    if 'slow' in item.keywords and not item.config.getoption('all'):
        pytest.skip("skipping slow tests")

@pytest.fixture(scope="session")
def csv_dir(request):
    import pbirch.defaults
    csv_dir = request.config.getoption("csv_dir")
    if not csv_dir:
        csv_dir = pbirch.defaults.get_default_csv_dir()
    if not os.path.isfile(os.path.join(csv_dir, 'items.csv')):
        raise pytest.skip("Veekun CSV data unavailable")
    return csv_dir
