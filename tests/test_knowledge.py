"""Static lookup tables: total functions with templated misses."""

from care_agent.knowledge import check_iv_compatibility, specialty_insight


class TestIvCompatibility:

    def test_incompatible(self):
        result = check_iv_compatibility("vancomycin", "piperacillin-tazobactam")
        assert "incompatible" in result

    def test_compatible(self):
        result = check_iv_compatibility("dopamine", "norepinephrine")
        assert "are compatible" in result

    def test_order_independent(self):
        forward = check_iv_compatibility("heparin", "morphine")
        assert forward == check_iv_compatibility("morphine", "heparin")
        assert forward.startswith("heparin and morphine are compatible")

    def test_case_and_whitespace_insensitive(self):
        assert check_iv_compatibility("  DOPAMINE ", "Norepinephrine") == check_iv_compatibility("dopamine", "norepinephrine")

    def test_hyphenated_multi_word_name(self):
        assert "are compatible" in check_iv_compatibility("potassium-chloride", "insulin")
        assert "incompatible" in check_iv_compatibility("ceftriaxone", "Calcium-Gluconate")
        assert "incompatible" in check_iv_compatibility("piperacillin tazobactam", "vancomycin")

    def test_unknown_pair_is_templated_in_sorted_order(self):
        expected = (
            "No compatibility data for glucose and saline. "
            "Consult the IV compatibility literature before co-administering."
        )
        assert check_iv_compatibility("saline", "glucose") == expected
        assert check_iv_compatibility("glucose", "saline") == expected


class TestSpecialtyInsight:

    def test_hit(self):
        assert "CHA2DS2-VASc" in specialty_insight("Cardiology", "Atrial Fibrillation")

    def test_order_sensitive(self):
        assert specialty_insight("heart failure", "cardiology").startswith("No heart failure insight")

    def test_miss_never_raises(self):
        assert "Consult current specialty literature" in specialty_insight("", "")
