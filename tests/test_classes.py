import pytest

from modrepo.classes import IGNORED_CLASSES, is_ignored_class


@pytest.mark.parametrize(
    "name",
    [
        "FGHologram",
        "FGBuildableWall",
        "FGPowerInfoComponent",
        "SizeBox",
        "BlueprintGeneratedClass",
        "MaterialExpressionTextureSampleParameter2D",
        "HierarchicalInstancedStaticMeshComponent",
    ],
)
def test_known_classes_are_ignored(name):
    assert is_ignored_class(name) is True


@pytest.mark.parametrize(
    "name",
    ["FGBuildable", "FGItemDescriptor", "FGRecipe", "BodySetup", "", "fghologram", "FGHologram "],
)
def test_other_classes_are_not_ignored(name):
    assert is_ignored_class(name) is False


def test_set_and_predicate_agree():
    assert all(is_ignored_class(name) for name in IGNORED_CLASSES)
    assert "FGSchematic" not in IGNORED_CLASSES