"""
Erreurs de construction d'un document email.

Toutes les erreurs portent le chemin du bloc fautif : tuple de segments
(index, type) depuis la racine, affiché sous la forme ``container[0] > feed[2]``.
Aucune erreur n'est jamais retournée comme résultat : elles sont levées et
interrompent la construction du document entier.
"""
from typing import Sequence

BlockPath = tuple[tuple[int, str], ...]


def format_path(path: BlockPath) -> str:
    """``((0, "container"), (2, "feed"))`` → ``"container[0] > feed[2]"``."""
    if not path:
        return "<document>"
    return " > ".join(f"{tag}[{index}]" for index, tag in path)


class BuildError(Exception):
    """Base de toutes les erreurs du moteur de composition."""
    kind = "build_error"

    def __init__(self, message: str, path: BlockPath = ()):
        self.path = tuple(path)
        self.message = message
        super().__init__(f"{message} (bloc : {format_path(self.path)})")

    def to_dict(self) -> dict:
        return {"kind": self.kind, "error": self.message, "path": format_path(self.path)}


class UnknownBlockType(BuildError):
    kind = "unknown_block_type"

    def __init__(self, tag: str, path: BlockPath = ()):
        self.tag = tag
        super().__init__(f"Type de bloc inconnu : {tag!r}", path)


class MissingRequiredProperty(BuildError):
    kind = "missing_required_property"

    def __init__(self, name: str, path: BlockPath = ()):
        self.name = name
        super().__init__(f"Propriété requise absente : {name!r}", path)


class InvalidChildPolicy(BuildError):
    kind = "invalid_child_policy"

    def __init__(self, tag, path: BlockPath = (), reason: str = "type non synthétisable"):
        self.tag = tag
        super().__init__(f"Politique d'enfants invalide ({reason}) : {tag!r}", path)


class InvalidBlockProperties(BuildError):
    kind = "invalid_block_properties"

    def __init__(self, tag: str, path: BlockPath = (), detail: str = ""):
        self.tag = tag
        self.detail = detail
        super().__init__(f"Propriétés invalides pour {tag!r} : {detail}", path)


class UnexpectedChildren(BuildError):
    """Un bloc feuille déclare des enfants."""
    kind = "unexpected_children"

    def __init__(self, tag: str, path: BlockPath = ()):
        self.tag = tag
        super().__init__(f"Le type {tag!r} n'accepte pas d'enfants", path)


class FeedFetchFailed(BuildError):
    kind = "feed_fetch_failed"

    def __init__(self, source: str, cause: BaseException, path: BlockPath = ()):
        self.source = source
        self.cause = cause
        super().__init__(f"Échec de récupération du flux {source!r} : {cause}", path)


class DocumentBuildTimeout(BuildError):
    kind = "document_build_timeout"

    def __init__(self, seconds: float):
        self.seconds = seconds
        super().__init__(f"Construction du document interrompue après {seconds}s")


class DocumentBuildError(BuildError):
    """Plusieurs blocs frères ont échoué en parallèle : une seule erreur agrégée."""
    kind = "document_build_error"

    def __init__(self, errors: Sequence[BuildError]):
        self.errors = list(errors)
        summary = "; ".join(e.message for e in self.errors)
        first_path = self.errors[0].path if self.errors else ()
        super().__init__(f"{len(self.errors)} erreurs : {summary}", first_path)

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["errors"] = [e.to_dict() for e in self.errors]
        return data


class BlockBuildFailed(BuildError):
    """Exception inattendue levée pendant la construction d'un bloc (expanseur tiers…)."""
    kind = "block_build_failed"

    def __init__(self, tag: str, cause: BaseException, path: BlockPath = ()):
        self.tag = tag
        self.cause = cause
        super().__init__(f"Échec de construction de {tag!r} : {cause}", path)


class InvalidManifest(BuildError):
    """Manifest mal formé (JSON illisible ou schéma non respecté)."""
    kind = "invalid_manifest"

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"Manifest invalide : {cause}")
