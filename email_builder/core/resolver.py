"""
Résolution des propriétés d'un bloc.

Ordre de priorité (du plus faible au plus fort) :
  défauts du type → défauts du document → overrides de l'appelant → champs calculés

Les valeurs mapping sont fusionnées clé par clé sur un niveau
(`margin.top` sans écraser `margin.bottom`) ; tout le reste est remplacé.
"""
import copy
from typing import Any, Mapping, Optional


def _merge_layer(base: dict, layer: Mapping[str, Any]) -> None:
    for key, value in layer.items():
        current = base.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            base[key] = {**current, **copy.deepcopy(dict(value))}
        else:
            base[key] = copy.deepcopy(value)


def resolve(
    block_type: str,
    builtin_defaults: Mapping[str, Any],
    caller_overrides: Optional[Mapping[str, Any]] = None,
    computed_fields: Optional[Mapping[str, Any]] = None,
    *,
    document_defaults: Optional[Mapping[str, Any]] = None,
) -> dict[str, Any]:
    """
    Fusionne les couches de propriétés pour une instance de `block_type`.

    Fonction pure : les mappings d'entrée ne sont jamais modifiés ni partagés
    avec le résultat (copie profonde).

    Returns:
        Mapping final des propriétés
    """
    props: dict[str, Any] = copy.deepcopy(dict(builtin_defaults))
    for layer in (document_defaults, caller_overrides, computed_fields):
        if layer:
            _merge_layer(props, layer)
    return props
