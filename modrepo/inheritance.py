"""Known game class hierarchy and helpers to query it."""

from types import MappingProxyType
from typing import Dict, Mapping

# Each parent class mapped to its direct subclasses; "" holds the roots.
_SUBCLASSES: Dict[str, str] = {
    "": """
        FGItemDescriptor FGBuildable FGBuildablePipeBase FGRecipe FGBuildCategory
        FGResourceNode FGUnlock FGCharacterBase FGBuildablePipelineAttachment
        FGEquipment FGVehicle FGSchematic FGResearchTree FGResearchTreeNode
        FGItemCategory FGSchematicCategory FGInventoryComponent FGDamageOverTime
        FGResourceSinkSettings FGWorkBench FGEquipmentAttachment BodySetup
    """,
    "FGItemDescriptor": """
        FGBuildDescriptor FGEquipmentDescriptor FGItemDescriptorBiomass
        FGItemDescriptorNuclearFuel FGResourceDescriptor FGWildCardDescriptor
        FGResourceSinkCreditDescriptor
    """,
    "FGBuildDescriptor": "FGBuildingDescriptor FGVehicleDescriptor",
    "FGBuildingDescriptor": "FGDecorDescriptor FGPoleDescriptor",
    "FGEquipmentDescriptor": "FGConsumableDescriptor FGDecorationDescriptor",
    "FGResourceDescriptor": "FGResourceDescriptorGeyser",
    "FGBuildable": """
        FGBuildableConveyorBase FGBuildableDecor FGBuildableFactory
        FGBuildableFactoryBuilding FGBuildableHubTerminal FGBuildablePole
        FGBuildablePowerPole FGBuildableRailroadBridge FGBuildableRailroadTrack
        FGBuildableBuildableRoad FGBuildableSpeedSign FGBuildableStandaloneSign
        FGBuildableWire
    """,
    "FGBuildableConveyorBase": "FGBuildableConveyorBelt FGBuildableConveyorLift",
    "FGBuildableFactory": """
        FGBuildableConveyorAttachment FGBuildableDockingStation FGBuildableGenerator
        FGBuildableManufacturer FGBuildableRadarTower FGBuildableRailroadSignal
        FGBuildableRailroadSwitchControl FGBuildableResourceExtractor
        FGBuildableSpaceElevator FGBuildableStorage FGBuildableTradingPost
        FGBuildableTrainPlatform FGBuildableWindTurbine FGBuildableResourceSink
        FGBuildablePipeReservoir FGBuildableResourceSinkShop FGBuildablePipePart
    """,
    "FGBuildableFactoryBuilding": """
        FGBuildableFloor FGBuildableFoundation FGBuildableWalkway FGBuildableWall
    """,
    "FGBuildablePole": "FGConveyorPoleStackable",
    "FGBuildableConveyorAttachment": "FGBuildableAttachmentMerger FGBuildableAttachmentSplitter",
    "FGBuildableAttachmentSplitter": "FGBuildableSplitterSmart",
    "FGBuildableGenerator": "FGBuildableGeneratorFuel FGBuildableGeneratorGeoThermal",
    "FGBuildableGeneratorFuel": "FGBuildableGeneratorNuclear",
    "FGBuildableManufacturer": "FGBuildableAutomatedWorkBench FGBuildableConverter",
    "FGBuildableStorage": "FGBuildableCentralStorageContainer",
    "FGBuildableTrainPlatform": """
        FGBuildableRailroadStation FGBuildableTrainPlatformCargo
        FGBuildableTrainPlatformEmpty
    """,
    "FGBuildableFoundation": "FGBuildableRamp FGBuildableStair",
    "FGBuildableWall": "FGBuildablePoweredWall FGBuildableSignWall",
    "FGBuildablePipePart": "FGBuildablePipeHyperPart",
    "FGBuildablePipeHyperPart": "FGBuildablePipeHyperStart FGPipeHyperStart",
    "FGBuildablePipeBase": "FGBuildablePipeHype FGBuildablePipeline FGBuildablePipeHyper",
    "FGRecipe": "FGResearchRecipe",
    "FGBuildCategory": "FGBuildSubCategory",
    "FGResourceNode": "FGResourceNodeGeyser FGResourceDeposit",
    "FGUnlock": "FGUnlockRecipe FGUnlockScannableResource",
    "FGCharacterBase": "FGCreature",
    "FGCreature": "FGEnemy",
    "FGBuildablePipelineAttachment": "FGBuildablePipelineJunction FGBuildablePipelinePump",
    "FGEquipment": "FGConsumableEquipment",
    "FGVehicle": "FGRailroadVehicle",
    "FGRailroadVehicle": "FGLocomotive FGFreightWagon",
}

CLASS_INHERITANCE: Mapping[str, str] = MappingProxyType(
    {
        child: parent
        for parent, children in _SUBCLASSES.items()
        for child in children.split()
    }
)


def trim(value: str) -> str:
    """Strip NUL characters from both ends of ``value``."""
    return value.strip("\x00")


def get_tree_size(class_name: str) -> int:
    """Return how many known classes lie on the path from ``class_name`` to its root."""
    size = 0
    while class_name in CLASS_INHERITANCE:
        size += 1
        class_name = CLASS_INHERITANCE[class_name]
    return size


def is_a(child: str, parent: str) -> bool:
    """Tell whether ``child`` is ``parent`` or derives from it."""
    while True:
        if parent == child:
            return True
        if child not in CLASS_INHERITANCE:
            return False
        child = CLASS_INHERITANCE[child]