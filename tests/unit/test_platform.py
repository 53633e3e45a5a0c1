"""Unit tests for OS and architecture normalization."""
import pytest

from osdetect_core.platform import (
    ARCH_ALIASES,
    ARCH_NAMES,
    OS_NAMES,
    UNKNOWN,
    guess_bitness_from_architecture,
    normalize_arch,
    normalize_os,
)


class TestNormalizeArch:
    """Tests for architecture normalization."""

    @pytest.mark.parametrize("raw,expected", [
        ("x8664", "x86_64"),
        ("amd64", "x86_64"),
        ("AMD64", "x86_64"),
        ("x86_64", "x86_64"),
        ("ia32e", "x86_64"),
        ("em64t", "x86_64"),
        ("x64", "x86_64"),
        ("x8632", "x86_32"),
        ("x86", "x86_32"),
        ("i386", "x86_32"),
        ("i486", "x86_32"),
        ("i586", "x86_32"),
        ("i686", "x86_32"),
        ("ia32", "x86_32"),
        ("x32", "x86_32"),
        ("sparc", "sparc_32"),
        ("sparcv9", "sparc_64"),
        ("arm", "arm_32"),
        ("arm32", "arm_32"),
        ("armv7l", "arm_32"),
        ("aarch64", "aarch_64"),
        ("arm64", "aarch_64"),
        ("ppc", "ppc_32"),
        ("ppc64", "ppc_64"),
        ("ppc64le", "ppcle_64"),
        ("s390", "s390_32"),
        ("s390x", "s390_64"),
        ("riscv", "riscv"),
        ("riscv64", "riscv64"),
        ("loongarch64", "loongarch_64"),
        ("unknown_arch", "unknown"),
    ])
    def test_known_aliases(self, raw, expected):
        assert normalize_arch(raw) == expected

    def test_arm64_is_not_arm(self):
        """Exact token matching keeps arm64 and arm apart."""
        assert normalize_arch("arm64") != normalize_arch("arm")

    def test_no_substring_matches(self):
        """Tokens merely containing a known alias are unknown."""
        assert normalize_arch("x86_64_custom") == UNKNOWN
        assert normalize_arch("amd64x") == UNKNOWN

    def test_empty_and_none(self):
        assert normalize_arch("") == UNKNOWN
        assert normalize_arch(None) == UNKNOWN

    def test_table_targets_are_canonical(self):
        """Every alias maps into the fixed vocabulary."""
        for target in ARCH_ALIASES.values():
            assert target in ARCH_NAMES

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            ARCH_ALIASES["foo"] = "bar"  # type: ignore[index]


class TestNormalizeOS:
    """Tests for OS name normalization."""

    @pytest.mark.parametrize("raw,expected", [
        ("aix", "aix"),
        ("AIX", "aix"),
        ("hpux", "hpux"),
        ("HP-UX", "hpux"),
        ("os400", "os400"),
        ("OS/400", "os400"),
        ("linux", "linux"),
        ("Linux", "linux"),
        ("mac", "osx"),
        ("Mac OS X", "osx"),
        ("osx", "osx"),
        ("Darwin", "osx"),
        ("freebsd", "freebsd"),
        ("FreeBSD", "freebsd"),
        ("openbsd", "openbsd"),
        ("OpenBSD", "openbsd"),
        ("netbsd", "netbsd"),
        ("NetBSD", "netbsd"),
        ("solaris", "sunos"),
        ("SunOS", "sunos"),
        ("windows", "windows"),
        ("Windows", "windows"),
        ("Windows 10", "windows"),
        ("Windows Server 2019", "windows"),
        ("Microsoft Windows", "windows"),
        ("Apple Mac OS X", "osx"),
        ("Apple macOS", "osx"),
        ("zos", "zos"),
        ("z/OS", "zos"),
        ("unknown_os", "unknown"),
    ])
    def test_known_names(self, raw, expected):
        assert normalize_os(raw) == expected

    def test_os400_followed_by_digit(self):
        assert normalize_os("os4000") == UNKNOWN

    def test_empty_and_none(self):
        assert normalize_os("") == UNKNOWN
        assert normalize_os(None) == UNKNOWN

    def test_results_are_canonical(self):
        for raw in ("Linux", "Mac OS X", "Windows 11", "FooOS", "AIX"):
            result = normalize_os(raw)
            assert result in OS_NAMES or result == UNKNOWN


class TestGuessBitness:
    """Tests for guessing bitness from an architecture name."""

    @pytest.mark.parametrize("arch,expected", [
        ("x86_64", 64),
        ("amd64", 64),
        ("ppc64", 64),
        ("aarch_64", 64),
        ("arm64", 64),
        ("s390x", 64),
        ("sparcv9", 64),
        ("x86_32", 32),
        ("x86", 32),
        ("i686", 32),
        ("arm_32", 32),
        ("arm", 32),
    ])
    def test_guess(self, arch, expected):
        assert guess_bitness_from_architecture(arch) == expected

    def test_unresolved(self):
        assert guess_bitness_from_architecture("riscv") == 0
        assert guess_bitness_from_architecture("mystery") == 0
        assert guess_bitness_from_architecture("") == 0
        assert guess_bitness_from_architecture(None) == 0
