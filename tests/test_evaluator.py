from passgen.evaluator import (
    detect_weak_patterns,
    entropy_bonus,
    estimate_entropy,
    has_ascending_run,
    has_repeated_chars,
    length_score,
    score_password,
    strength_score,
    uniqueness_score,
    variety_score,
    char_classes,
)
from passgen.lang import Language

def test_short_and_empty_score_zero():
    assert strength_score("") == 0
    assert strength_score("123") == 0
    assert strength_score("abc") == 0

def test_common_passwords_score_zero():
    for pw in ("password", "123456", "PassWord", "QWERTY", "111111", "1234"):
        assert strength_score(pw) == 0
    result = score_password("admin")
    assert result["score"] == 0
    assert "common" in " ".join(result["explanations"]).lower()

def test_known_scores():
    assert strength_score("MyP@ssw0rd") == 64
    assert strength_score("password123") == 28
    assert strength_score("Password123") == 39
    assert strength_score("P@ssw0rd123") == 45
    assert strength_score("Password1") == 47
    assert strength_score("MyP@ssw0rd!2024") == 75
    assert strength_score("MyV3ry$tr0ngP@ssw0rd!") == 75
    assert strength_score("abcd") == 6

def test_strong_passwords_stay_below_ninety():
    # 25 length + 25 variety + 20 uniqueness + 10 entropy
    assert strength_score("Kp@3#mN9!qZ$7%vR*2&xY5^wL8+dF6") == 80
    assert strength_score("aB1@cD2#eF3$gH4%iJ5^kL6&mN7*oP8(qR9)sT0_uV1+wX2-yZ3") == 78

def test_mypassword_is_strong():
    assert score_password("MyP@ssw0rd")["label"] == "Strong"
    assert score_password("MyP@ssw0rd", Language.RUSSIAN)["label"] == "Сильный"

def test_score_is_deterministic():
    for pw in ("MyP@ssw0rd", "x", "Tr0ub4dor&3", "aaaaaaaaaaaa"):
        assert strength_score(pw) == strength_score(pw)

def test_breakdown():
    result = score_password("MyP@ssw0rd")
    assert result["length_score"] == 15
    assert result["variety_score"] == 25
    assert result["uniqueness_score"] == 18
    assert result["penalty"] == 0
    assert result["entropy_bonus"] == 6
    assert result["explanations"]

def test_penalty_is_capped():
    # "password" + "123" + ascending run = 40, capped at 30
    result = score_password("password123")
    assert result["penalty"] == 30
    assert "password" in result["explanations"][0]

def test_length_buckets():
    assert [length_score(n) for n in (4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 50)] == [
        0, 5, 5, 10, 10, 15, 15, 20, 20, 25, 25
    ]

def test_variety_score():
    assert variety_score(char_classes("abcd")) == 5
    assert variety_score(char_classes("ab12")) == 15
    assert variety_score(char_classes("aB1")) == 25
    assert variety_score(char_classes("aB1!")) == 25
    assert variety_score(char_classes("!!")) == 10

def test_special_chars_include_brackets():
    for c in "[]{}()<>":
        assert char_classes(c)["special"]

def test_uniqueness_score():
    assert uniqueness_score("abcd") == 20
    assert uniqueness_score("aaaa") == 5
    assert uniqueness_score("MyP@ssw0rd") == 18

def test_weak_patterns():
    assert detect_weak_patterns("MyPassword123") == ["password", "123"]
    assert detect_weak_patterns("xLetMeInx") == ["letmein"]
    assert detect_weak_patterns("Xk9!") == []

def test_structure_detectors():
    assert has_ascending_run("xxabc")
    assert has_ascending_run("789")
    assert not has_ascending_run("cba")
    assert not has_ascending_run("ab")
    assert has_repeated_chars("zzz1")
    assert not has_repeated_chars("zz1z")

def test_entropy():
    assert estimate_entropy("") == 0.0
    assert estimate_entropy("    ") == 0.0
    assert estimate_entropy("Ab1!" * 4) > estimate_entropy("Ab1!")
    assert entropy_bonus("MyP@ssw0rd") == 6
    assert entropy_bonus("Ab1!" * 10) == 10

def test_score_bounds():
    for pw in ("    ", "aaaa", "zzzzzzzzzzzzzzzz", "Kp@3#mN9!qZ$7%vR*2&xY5^wL8+dF6" * 3):
        s = strength_score(pw)
        assert 0 <= s <= 100
