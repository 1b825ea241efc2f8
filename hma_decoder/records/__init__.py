from .artemis import artemis_kind, link_artemis
from .bays import aggregate_bays
from .fluff import assemble_fluff

__all__ = [
    'artemis_kind',
    'link_artemis',
    'aggregate_bays',
    'assemble_fluff',
]
