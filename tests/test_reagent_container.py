# tests/test_reagent_container.py
from tests.fixtures import ChemistryTestBase, make_container, make_object
from chemistry.items.reagent_container import ContainerConfig, ContainerConfigError, ReagentContainer
from chemistry.items.reagent_mix import ReagentMix
from chemistry.transfer.transfer_mode import TransferMode

class TestContainerConfig(ChemistryTestBase):

    def test_defaults(self):
        config = ContainerConfig()
        self.assertEqual(config.capacity, 100.0)
        self.assertEqual(config.transfer_mode, TransferMode.NORMAL)
        self.assertEqual(config.transfer_amount, 20.0)
        self.assertFalse(config.trait_whitelist_on)
        self.assertFalse(config.reagent_whitelist_on)

    def test_rejects_out_of_range_values(self):
        bad_configs = [
            {"capacity": 0},
            {"transfer_amount": 0.5},
            {"transfer_amount": 101},
            {"possible_transfer_amounts": (5, 150)},
            {"transfer_mode": 7},
        ]
        for kwargs in bad_configs:
            with self.subTest(**{k: str(v) for k, v in kwargs.items()}):
                with self.assertRaises(ContainerConfigError):
                    ContainerConfig(**kwargs)

    def test_is_immutable(self):
        config = ContainerConfig()
        with self.assertRaises(AttributeError):
            config.capacity = 5 # type: ignore

    def test_from_dict(self):
        config = ContainerConfig.from_dict({
            "capacity": 15, "transfer_mode": "Syringe", "transfer_amount": 5,
            "possible_transfer_amounts": [5, 10, 15], "reagent_whitelist": ["blood"],
            "trait_whitelist": ["vein"]
        })
        self.assertEqual(config.transfer_mode, TransferMode.SYRINGE)
        self.assertEqual(config.possible_transfer_amounts, (5.0, 10.0, 15.0))
        self.assertEqual(config.reagent_whitelist, frozenset({"blood"}))
        self.assertTrue(config.trait_whitelist_on)

    def test_from_dict_mode_spellings(self):
        for spelling in ("OutputOnly", "output_only", "OUTPUT ONLY"):
            with self.subTest(spelling=spelling):
                self.assertEqual(ContainerConfig.from_dict({"transfer_mode": spelling}).transfer_mode,
                                 TransferMode.OUTPUT_ONLY)

    def test_from_dict_unknown_mode(self):
        with self.assertRaises(ContainerConfigError):
            ContainerConfig.from_dict({"transfer_mode": "Sideways"})

class TestReagentContainer(ChemistryTestBase):

    def test_name_comes_from_owner(self):
        container = make_container()
        self.assertEqual(container.name, "container")
        make_object("Beaker", container)
        self.assertEqual(container.name, "Beaker")

    def test_empty_and_full(self):
        container = make_container(capacity=10)
        self.assertTrue(container.is_empty)
        self.assertFalse(container.is_full)
        container.add(ReagentMix({"water": 10}))
        self.assertFalse(container.is_empty)
        self.assertTrue(container.is_full)

    def test_add_never_exceeds_capacity(self):
        container = make_container(capacity=10, contents={"water": 4})
        result = container.add(ReagentMix({"water": 9}))
        self.assertTrue(result.success)
        self.assertAlmostEqual(result.transfer_amount, 6)
        self.assertAlmostEqual(result.excess.total, 3)
        self.assertVolume(container, 10)

    def test_failed_add_leaves_contents_untouched(self):
        container = make_container(capacity=100, contents={"water": 99.9995})
        result = container.add(ReagentMix({"acid": 20}))

        self.assertFalse(result.success)
        self.assertEqual(result.transfer_amount, 0)
        self.assertEqual(container.mix, ReagentMix({"water": 99.9995}))
        self.assertNotIn("acid", container.mix)
        self.assertAlmostEqual(result.excess.amount_of("acid"), 20)

    def test_initial_contents_over_capacity(self):
        with self.assertRaises(ContainerConfigError):
            ReagentContainer(ContainerConfig(capacity=5), ReagentMix({"water": 6}))

    def test_transfer_amount_setter_validates(self):
        container = make_container()
        container.transfer_amount = 50
        self.assertEqual(container.transfer_amount, 50)
        with self.assertRaises(ContainerConfigError):
            container.transfer_amount = 0

    def test_reinstate_and_spill_all(self):
        container = make_container(contents={"water": 30})
        taken = container.take(10)
        container.reinstate(taken)
        self.assertVolume(container, 30)
        spilled = container.spill_all()
        self.assertAlmostEqual(spilled.total, 30)
        self.assertTrue(container.is_empty)
