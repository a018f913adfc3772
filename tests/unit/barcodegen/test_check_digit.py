import pytest

from upcgen.barcodegen.check_digit import calc_check_digit


class TestCheckDigit:
    @pytest.mark.parametrize(
        "payload,expected",
        [
            ("03600029145", "2"),
            ("01234500006", "5"),
            ("00001234565", "6"),
            ("11234500006", "2"),
            ("00000000000", "0"),
            ("72527273070", "6"),
        ],
    )
    def test_known_values(self, payload: str, expected: str) -> None:
        assert calc_check_digit(payload) == expected

    def test_result_is_single_digit(self) -> None:
        for i in range(0, 100000000000, 7919999999):
            digit = calc_check_digit(str(i).zfill(11))
            assert len(digit) == 1 and digit.isdigit()

    def test_recomputation_is_stable(self) -> None:
        payload = "03600029145"
        assert calc_check_digit(payload) == calc_check_digit(payload)

    def test_full_code_sums_to_multiple_of_ten(self) -> None:
        payload = "98765432109"
        full = payload + calc_check_digit(payload)
        weighted = sum(int(c) * (3 if i % 2 == 0 else 1) for i, c in enumerate(full))
        assert weighted % 10 == 0

    @pytest.mark.parametrize("bad", ["", "1234567890", "123456789012", "1234567890a"])
    def test_rejects_wrong_input(self, bad: str) -> None:
        with pytest.raises(ValueError, match="11 digits"):
            calc_check_digit(bad)
