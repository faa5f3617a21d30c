import copy

import pytest

META_KEYS = [
    "_isSubplotObj",
    "_isLinkedToArray",
    "_arrayAttrRegexps",
    "_deprecated",
    "description",
    "role",
    "editType",
    "impliedEdits",
]


@pytest.fixture
def meta_keys():
    return list(META_KEYS)


@pytest.fixture
def make_document():
    def _make(traces=None, layout=None, transforms=None, meta_keys=None):
        document = {
            "traces": copy.deepcopy(traces or {}),
            "layout": {"layoutAttributes": copy.deepcopy(layout or {})},
            "defs": {"metaKeys": list(META_KEYS if meta_keys is None else meta_keys)},
        }
        if transforms is not None:
            document["transforms"] = copy.deepcopy(transforms)
        return document

    return _make


@pytest.fixture
def scatter_document(make_document):
    return make_document(
        traces={
            "scatter": {
                "meta": {"description": "The scatter trace type."},
                "attributes": {
                    "type": "scatter",
                    "x": {
                        "valType": "data_array",
                        "role": "data",
                        "editType": "calc+clearAxisTypes",
                        "description": "Sets the x coordinates.",
                    },
                },
            }
        }
    )
