import pickle

import pytest

from astrorates.core.reaction import (
    ArrheniusParameters,
    CosmicRayParameters,
    GrainParameters,
    NetworkReaction,
    PhotoParameters,
    ReactionCategory,
    ReactionFamily,
    UnknownCategoryError,
    parameters_for,
)


def test_category_codes():
    assert ReactionCategory.from_code(0) is ReactionCategory.GRAIN_RECOMBINATION
    assert ReactionCategory.from_code(13) is ReactionCategory.PHOTOPROCESS
    assert ReactionCategory.from_code(14) is ReactionCategory.OTHER
    assert ReactionCategory.from_code(23) is ReactionCategory.PHOTODESORPTION
    assert ReactionCategory.from_code(ReactionCategory.NEUTRAL_NEUTRAL) is (
        ReactionCategory.NEUTRAL_NEUTRAL
    )
    assert sorted(int(c) for c in ReactionCategory) == list(range(15)) + [20, 21, 22, 23]


@pytest.mark.parametrize("code", [15, 16, 19, 24, 99, -1, "seven", None])
def test_unknown_codes(code):
    with pytest.raises(UnknownCategoryError) as excinfo:
        ReactionCategory.from_code(code, reaction_no=7)
    assert excinfo.value.category == code
    assert excinfo.value.reaction_no == 7
    assert isinstance(excinfo.value, ValueError)


def test_unknown_category_pickles():
    e = pickle.loads(pickle.dumps(UnknownCategoryError(99, 3)))
    assert (e.category, e.reaction_no) == (99, 3)
    assert str(e) == "unknown reaction type 99 for reaction 3"


def test_families():
    families = {c: c.family for c in ReactionCategory}
    assert families[ReactionCategory.GRAIN_RECOMBINATION] == ReactionFamily.GRAIN_RECOMBINATION
    assert families[ReactionCategory.COSMIC_RAY_IONIZATION] == ReactionFamily.COSMIC_RAY
    assert families[ReactionCategory.PHOTOPROCESS] == ReactionFamily.PHOTO
    assert [int(c) for c in ReactionCategory if c.family == ReactionFamily.ARRHENIUS] == [
        2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 14,
    ]
    assert [int(c) for c in ReactionCategory if c.family == ReactionFamily.GRAIN_SURFACE] == [
        20, 21, 22, 23,
    ]


def test_descriptions():
    assert ReactionCategory.DISSOCIATIVE_RECOMBINATION.description == "dissociative recombination"
    assert all(c.description for c in ReactionCategory)


def test_parameters_for():
    assert parameters_for(0, 1e-3, 0.5, 0.0) == ArrheniusParameters(1e-3, 0.5, 0.0)
    assert parameters_for(1, 0.97, 0.0, 0.0) == CosmicRayParameters(0.97)
    assert parameters_for(7, 1e-10, 0.5, 30.0) == ArrheniusParameters(1e-10, 0.5, 30.0)
    assert parameters_for(13, 1e-10, 0.0, 1.7) == PhotoParameters(1e-10, 1.7)

    grain = parameters_for(21, 1.0, 28.0, 1150.0)
    assert grain == GrainParameters(1.0, 28.0, 1150.0)
    assert grain.mass == 28.0
    assert grain.binding_energy == 1150.0

    with pytest.raises(UnknownCategoryError):
        parameters_for(99, 1.0, 0.0, 0.0)


def test_as_triple():
    assert ArrheniusParameters(1e-10, 0.5, 30.0).as_triple() == (1e-10, 0.5, 30.0)
    assert CosmicRayParameters(0.97).as_triple() == (0.97, 0.0, 0.0)
    assert PhotoParameters(1e-10, 1.7).as_triple() == (1e-10, 0.0, 1.7)
    assert GrainParameters(1.0, 28.0, 1150.0).as_triple() == (1.0, 28.0, 1150.0)


def test_parameters_are_immutable():
    params = ArrheniusParameters(1e-10, 0.5, 30.0)
    with pytest.raises(AttributeError):
        params.alpha = 2e-10


def test_grain_parameters_from_species():
    params = GrainParameters.from_species("CO(ice)", 1.0, 1150.0)
    assert params.mass == pytest.approx(28.01, rel=1e-3)
    assert params.binding_energy == 1150.0


def test_parameters_serialization():
    params = GrainParameters(1.0, 18.0, 5700.0)
    assert GrainParameters.from_dict(params.as_dict()) == params


def test_network_reaction():
    reaction = NetworkReaction.from_raw(4, ["H3+", "CO"], ["HCO+", "H2"], 1.61e-9, 0.0, 0.0, 2)
    assert reaction.category is ReactionCategory.ION_MOLECULE
    assert reaction.parameters == ArrheniusParameters(1.61e-9, 0.0, 0.0)
    assert str(reaction) == "4: H3+ + CO -> HCO+ + H2 (ion-molecule, charge exchange)"

    with pytest.raises(UnknownCategoryError) as excinfo:
        NetworkReaction.from_raw(5, ["CO"], ["CO(ice)"], 1.0, 28.0, 0.0, 30)
    assert excinfo.value.reaction_no == 5


def test_network_reaction_serialization():
    reaction = NetworkReaction.from_raw(9, ["CO"], ["CO(ice)"], 1.0, 28.0, 1150.0, 20)
    restored = NetworkReaction.from_dict(reaction.as_dict())
    assert restored.category is ReactionCategory.GRAIN_DEPLETION
    assert restored.parameters == reaction.parameters
    assert restored.reactants == ["CO"]
