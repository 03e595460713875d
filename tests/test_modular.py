import pytest
from Crypto.Util.number import GCD, inverse

from hillcrt.modular import extended_gcd, modular_inverse, positive_mod


@pytest.mark.parametrize("value", [-1000, -27, -26, -1, 0, 1, 25, 26, 441, 10**12])
@pytest.mark.parametrize("mod", [1, 2, 13, 26])
def test_positive_mod_range(value, mod):
    r = positive_mod(value, mod)
    assert 0 <= r < mod
    assert (r - value) % mod == 0


def test_positive_mod_negative():
    assert positive_mod(-1, 26) == 25
    assert positive_mod(-99, 13) == 5
    assert positive_mod(-343, 2) == 1


@pytest.mark.parametrize("a,b", [(240, 46), (46, 240), (17, 5), (13, 2), (0, 7), (7, 0), (441, 26)])
def test_extended_gcd_bezout(a, b):
    g, x, y = extended_gcd(a, b)
    assert g == GCD(a, b)
    assert a * x + b * y == g


def test_extended_gcd_base_case():
    assert extended_gcd(9, 0) == (9, 1, 0)


@pytest.mark.parametrize("mod", [2, 13, 26, 27, 169])
def test_modular_inverse_matches_pycryptodome(mod):
    for a in range(1, mod):
        if GCD(a, mod) != 1:
            continue
        x = modular_inverse(a, mod)
        assert x == inverse(a, mod)
        assert (a * x) % mod == 1


def test_modular_inverse_reduces_argument():
    assert modular_inverse(-1, 26) == 25
    assert modular_inverse(441, 13) == modular_inverse(12, 13) == 12


@pytest.mark.parametrize("a,mod", [(0, 13), (2, 26), (13, 26), (0, 2), (26, 13)])
def test_modular_inverse_none_when_not_coprime(a, mod):
    assert modular_inverse(a, mod) is None
