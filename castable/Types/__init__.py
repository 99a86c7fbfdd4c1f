from __future__ import annotations

from .AttributeTypes import JsonValue, TypeRef, OptionsMap, AttributeMap, CastFactory, MISSING

__all__ = ['JsonValue', 'TypeRef', 'OptionsMap', 'AttributeMap', 'CastFactory', 'MISSING']
