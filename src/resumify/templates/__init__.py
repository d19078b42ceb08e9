"""Layout registry for résumé rendering."""

from __future__ import annotations

import logging

from resumify.templates.base import RecordView, RenderedResume, RenderSession, ResumeTemplate
from resumify.templates.editable import EditableText
from resumify.templates.layouts.adora_montminy import AdoraMontminyTemplate
from resumify.templates.layouts.bartholomew_henderson import BartholomewHendersonTemplate
from resumify.templates.layouts.catrine_ziv import CatrineZivTemplate
from resumify.templates.layouts.claudia_alves import ClaudiaAlvesTemplate
from resumify.templates.layouts.daniel_gallego import DanielGallegoTemplate
from resumify.templates.layouts.donna_stroupe import DonnaStroupeTemplate
from resumify.templates.layouts.estelle_darcy import EstelleDarcyTemplate
from resumify.templates.layouts.francisco_andrade import FranciscoAndradeTemplate
from resumify.templates.layouts.jamie_chastain import JamieChastainTemplate
from resumify.templates.layouts.juliana_silva import JulianaSilvaTemplate
from resumify.templates.layouts.korina_villanueva import KorinaVillanuevaTemplate
from resumify.templates.layouts.olivia_wilson import OliviaWilsonTemplate
from resumify.templates.layouts.olivia_wilson_dark_blue import OliviaWilsonDarkBlueTemplate
from resumify.templates.layouts.phylis_flex import PhylisFlexTemplate
from resumify.templates.layouts.richard_sanchez_new import RichardSanchezNewTemplate
from resumify.templates.layouts.riaan_chandran import RiaanChandranTemplate

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_LAYOUT_ID",
    "EditableText",
    "RecordView",
    "RenderSession",
    "RenderedResume",
    "ResumeTemplate",
    "get_template",
    "is_registered",
    "list_templates",
    "template_ids",
]

DEFAULT_LAYOUT_ID = "korina-villanueva"

# Gallery order.
_REGISTRY: dict[str, ResumeTemplate] = {
    template.layout_id: template
    for template in (
        KorinaVillanuevaTemplate(),
        RiaanChandranTemplate(),
        AdoraMontminyTemplate(),
        JamieChastainTemplate(),
        DonnaStroupeTemplate(),
        RichardSanchezNewTemplate(),
        DanielGallegoTemplate(),
        ClaudiaAlvesTemplate(),
        BartholomewHendersonTemplate(),
        FranciscoAndradeTemplate(),
        OliviaWilsonTemplate(),
        EstelleDarcyTemplate(),
        JulianaSilvaTemplate(),
        CatrineZivTemplate(),
        OliviaWilsonDarkBlueTemplate(),
        PhylisFlexTemplate(),
    )
}


def get_template(layout_id: object) -> ResumeTemplate:
    """Return the layout registered under *layout_id*.

    Unknown, empty or ``None`` ids resolve to the default layout, as do
    values that are not strings at all (a stored ``{"id": ...}`` object,
    a number); lookup never fails.
    """
    template = _REGISTRY.get(layout_id) if isinstance(layout_id, str) else None
    if template is None:
        logger.debug("Unknown layout %r, falling back to %s", layout_id, DEFAULT_LAYOUT_ID)
        return _REGISTRY[DEFAULT_LAYOUT_ID]
    return template


def is_registered(layout_id: object) -> bool:
    return isinstance(layout_id, str) and layout_id in _REGISTRY


def template_ids() -> list[str]:
    """Return the ids of all registered layouts in gallery order."""
    return list(_REGISTRY)


def list_templates() -> list[dict[str, str]]:
    """Return gallery metadata (id, name, description) for every layout."""
    return [
        {"id": template.layout_id, "name": template.name, "description": template.description}
        for template in _REGISTRY.values()
    ]
