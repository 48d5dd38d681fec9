"""Dérivation du nom affiché à partir de l'identité de l'utilisateur."""

from __future__ import annotations

FALLBACK_DISPLAY_NAME = "Utilisateur"


def resolve_display_name(identity: str | None) -> str:
    """Retourne la partie d'une adresse e-mail située avant le premier ``@``.

    Une identité sans ``@`` est renvoyée telle quelle. Le libellé de repli est
    utilisé lorsque l'identité est absente ou que le résultat serait vide.
    """
    if not identity:
        return FALLBACK_DISPLAY_NAME
    name = identity.split("@", 1)[0]
    return name or FALLBACK_DISPLAY_NAME


def avatar_initial(display_name: str) -> str:
    """Initiale en majuscule affichée dans la pastille de profil."""
    name = display_name.strip() or FALLBACK_DISPLAY_NAME
    return name[0].upper()
