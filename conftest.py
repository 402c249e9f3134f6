import pytest
from strata.test_utils import all_name_kinds, make_name_factory


@pytest.fixture(params=all_name_kinds(), ids=lambda kind: kind.value)
def make_name(request):
    # Runs the requesting test once per name representation
    return make_name_factory(request.param)
