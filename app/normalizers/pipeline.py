from copy import deepcopy
from typing import List
from .base import Normalizer
from .types import ClientBlogRecord, Record
from .rules import RuleNormalizer

class NormalizerPipeline(Normalizer):
    """
    A chain of normalizers.
    Each stage takes the output of the previous stage; every stage must
    accept canonical records as input, which is what keeps the chain idempotent.
    """
    def __init__(self, stages: List[Normalizer]):
        self.stages = stages

    def normalize_record(self, rec: Record) -> ClientBlogRecord:
        out = deepcopy(rec)  # Don't mutate the input
        for stage in self.stages:
            out = stage.normalize_record(out)
        return out

_default = None

def get_default_normalizer() -> Normalizer:
    """Factory for the default pipeline (rule-based alias table only)."""
    global _default
    if _default is None:
        _default = NormalizerPipeline([RuleNormalizer()])
    return _default

def normalize_record(raw: Record) -> ClientBlogRecord:
    return get_default_normalizer().normalize_record(raw)
