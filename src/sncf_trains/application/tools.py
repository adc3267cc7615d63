"""Static catalogue of the tools exposed to hosts."""

from sncf_trains.domain.models import ToolDescriptor

SEARCH_TRAIN_TOOL_NAME = "sncf_search_train"
TRAIN_DETAILS_TOOL_NAME = "sncf_train_details"

SEARCH_TRAIN_TOOL = ToolDescriptor(
    name=SEARCH_TRAIN_TOOL_NAME,
    description=(
        "Recherche les trains entre deux villes via l'API SNCF. "
        "Fournit les horaires, durées et correspondances."
    ),
    input_schema={
        "type": "object",
        "properties": {
            "from": {
                "type": "string",
                "description": "Ville ou gare de départ",
            },
            "to": {
                "type": "string",
                "description": "Ville ou gare d'arrivée",
            },
            "datetime": {
                "type": "string",
                "description": "Date et heure de départ au format YYYYMMDDTHHmmss (optionnel)",
            },
        },
        "required": ["from", "to"],
    },
)

TRAIN_DETAILS_TOOL = ToolDescriptor(
    name=TRAIN_DETAILS_TOOL_NAME,
    description="Donne les détails d'un train SNCF à partir de son identifiant vehicle_journey.",
    input_schema={
        "type": "object",
        "properties": {
            "vehicle_journey_id": {
                "type": "string",
                "description": (
                    "Identifiant vehicle_journey du train "
                    "(ex: vehicle_journey:SNCF:2025-05-20:88721:1187:Train)"
                ),
            },
        },
        "required": ["vehicle_journey_id"],
    },
)

TOOLS: tuple[ToolDescriptor, ...] = (SEARCH_TRAIN_TOOL, TRAIN_DETAILS_TOOL)
