""" pbirch.defaults - logic for finding default paths """

import os

def get_default_csv_dir_with_origin():
    csv_dir = os.environ.get('PBIRCH_CSV_DIR', None)
    origin = 'environment'

    if csv_dir is None:
        csv_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                               'data', 'csv')
        origin = 'default'

    return csv_dir, origin


def get_default_csv_dir():
    return get_default_csv_dir_with_origin()[0]
