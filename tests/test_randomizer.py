import unittest

from catan_layout.domain.board import (
    BOARD_CONFIGS,
    FIVE_SIX_PLAYER_CONFIG,
    FOUR_PLAYER_CONFIG,
    BoardConfig,
    BoardConfigError,
    Resource,
)
from catan_layout.domain.placement import PlacementRules, is_balanced_placement
from catan_layout.domain.randomizer import (
    BALANCE_ATTEMPTS,
    RandomizerConfig,
    assign_resources,
    place_numbers,
    production_slots,
    validate_standard_counts,
)
from catan_layout.domain.seeding import hash_to_seed


class ResourceAssignmentTests(unittest.TestCase):
    def test_resource_count_distribution_is_exact(self) -> None:
        for config in BOARD_CONFIGS.values():
            resources = assign_resources(config, seed=101)
            self.assertEqual(len(resources), config.tile_count)
            self.assertEqual(resources.count(Resource.DESERT), config.desert_count)
            for resource, count in config.resource_counts.items():
                self.assertEqual(resources.count(resource), count, msg=f"{config.name} {resource}")

    def test_deserts_only_on_edge_tiles(self) -> None:
        for config in BOARD_CONFIGS.values():
            for seed in range(0, 5000, 97):
                resources = assign_resources(config, seed)
                for slot, resource in enumerate(resources):
                    if resource is Resource.DESERT:
                        self.assertTrue(config.positions[slot].is_edge, msg=f"{config.name} seed {seed}")

    def test_known_desert_slots(self) -> None:
        resources = assign_resources(FIVE_SIX_PLAYER_CONFIG, hash_to_seed("Test001"))
        self.assertEqual(production_slots(resources), [slot for slot in range(30) if slot not in (2, 28)])

    def test_resource_offset_changes_only_production_tiles(self) -> None:
        first = assign_resources(FOUR_PLAYER_CONFIG, 42)
        second = assign_resources(FOUR_PLAYER_CONFIG, 42, resource_seed_offset=501)
        self.assertEqual(production_slots(first), production_slots(second))
        self.assertNotEqual(first, second)

    def test_resource_pool_length_mismatch_is_rejected(self) -> None:
        class _OverfullConfig(BoardConfig):
            def resource_pool(self):
                return super().resource_pool() + [Resource.WOOD]

        config = _OverfullConfig(
            name="overfull",
            positions=FOUR_PLAYER_CONFIG.positions,
            resource_counts=FOUR_PLAYER_CONFIG.resource_counts,
            desert_count=FOUR_PLAYER_CONFIG.desert_count,
            number_tokens=FOUR_PLAYER_CONFIG.number_tokens,
        )
        with self.assertRaises(BoardConfigError):
            assign_resources(config, seed=42)


class NumberPlacementTests(unittest.TestCase):
    def test_balanced_placement_is_returned(self) -> None:
        resources = assign_resources(FOUR_PLAYER_CONFIG, 7)
        slots = production_slots(resources)
        placement = place_numbers(FOUR_PLAYER_CONFIG, slots, 7)
        self.assertTrue(placement.balanced)
        self.assertTrue(is_balanced_placement(placement.tokens, slots, FOUR_PLAYER_CONFIG.positions))
        self.assertEqual(sorted(placement.tokens, key=lambda t: t.letter), sorted(FOUR_PLAYER_CONFIG.number_tokens, key=lambda t: t.letter))

    def test_seed_jump_recovers_exhausted_round(self) -> None:
        seed = hash_to_seed("Test001")
        slots = production_slots(assign_resources(FIVE_SIX_PLAYER_CONFIG, seed))
        placement = place_numbers(FIVE_SIX_PLAYER_CONFIG, slots, seed)
        self.assertTrue(placement.balanced)
        self.assertEqual(placement.seed_jumps, 1)
        self.assertEqual(placement.attempts, BALANCE_ATTEMPTS + 16)

    def test_without_seed_jumps_last_candidate_is_kept(self) -> None:
        # Bounded latency trades away rule compliance on unlucky seeds.
        seed = hash_to_seed("Test001")
        slots = production_slots(assign_resources(FIVE_SIX_PLAYER_CONFIG, seed))
        placement = place_numbers(FIVE_SIX_PLAYER_CONFIG, slots, seed, RandomizerConfig(max_seed_jumps=0))
        self.assertFalse(placement.balanced)
        self.assertEqual(placement.attempts, BALANCE_ATTEMPTS)
        self.assertEqual(placement.seed_jumps, 0)
        self.assertEqual(len(placement.tokens), len(slots))

    def test_impossible_rules_terminate_after_budget(self) -> None:
        config = RandomizerConfig(
            balance_attempts=5,
            max_seed_jumps=2,
            rules=PlacementRules(high_pip_threshold=1, max_adjacent_high_pips=-1),
        )
        slots = production_slots(assign_resources(FOUR_PLAYER_CONFIG, 3))
        with self.assertLogs("catan_layout.domain.randomizer", level="WARNING"):
            placement = place_numbers(FOUR_PLAYER_CONFIG, slots, 3, config)
        self.assertFalse(placement.balanced)
        self.assertEqual(placement.attempts, config.max_candidates)
        self.assertEqual(placement.attempts, 15)
        self.assertEqual(placement.seed_jumps, 2)

    def test_invalid_randomizer_config(self) -> None:
        with self.assertRaises(ValueError):
            RandomizerConfig(balance_attempts=0)
        with self.assertRaises(ValueError):
            RandomizerConfig(max_seed_jumps=-1)


class StandardCountTests(unittest.TestCase):
    def _layout(self, seed: int):
        resources = assign_resources(FOUR_PLAYER_CONFIG, seed)
        slots = production_slots(resources)
        placement = place_numbers(FOUR_PLAYER_CONFIG, slots, seed)
        tokens = [None] * len(resources)
        for slot, token in zip(slots, placement.tokens):
            tokens[slot] = token
        return resources, tokens

    def test_generated_layout_has_standard_counts(self) -> None:
        resources, tokens = self._layout(42)
        self.assertTrue(validate_standard_counts(FOUR_PLAYER_CONFIG, resources, tokens))

    def test_desert_with_token_is_rejected(self) -> None:
        resources, tokens = self._layout(42)
        desert_slot = resources.index(Resource.DESERT)
        other_slot = next(slot for slot, token in enumerate(tokens) if token is not None)
        tokens[desert_slot], tokens[other_slot] = tokens[other_slot], None
        self.assertFalse(validate_standard_counts(FOUR_PLAYER_CONFIG, resources, tokens))

    def test_wrong_resource_mix_is_rejected(self) -> None:
        resources, tokens = self._layout(42)
        swap_slot = resources.index(Resource.ORE)
        resources[swap_slot] = Resource.WOOD
        self.assertFalse(validate_standard_counts(FOUR_PLAYER_CONFIG, resources, tokens))


if __name__ == "__main__":
    unittest.main()
