#!/usr/bin/env python3
"""Smoke test for the sharecred provisioning flow."""

import io
import sys
import tempfile
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


def test_validator():
    """Test username and password rules."""
    print("Testing Validator...")

    from sharecred.credentials.validator import is_valid_password, is_valid_username

    checks = [
        is_valid_username("abc"),
        not is_valid_username("ab"),
        not is_valid_username("a#b"),
        is_valid_password("Abcdef1!"),
        not is_valid_password("abcdef1!"),
        not is_valid_password("Abcdef12"),
    ]
    print(f"{sum(checks)}/{len(checks)} validator checks passed")
    return all(checks)


def test_generator():
    """Test password suggestions."""
    print("Testing Suggestion Generator...")

    from sharecred.credentials.generator import generate_suggestion
    from sharecred.credentials.validator import is_valid_password

    failures = [s for s in (generate_suggestion() for _ in range(1000)) if not is_valid_password(s)]
    if failures:
        print(f"Invalid suggestions: {failures[:5]}")
        return False

    print("1000 suggestions passed the password rule")
    return True


def test_provisioning():
    """Test a full provisioning run against a temporary directory."""
    print("Testing Provisioning...")

    from sharecred.models.settings import ProvisionSettings
    from sharecred.services.hashing import verify_password
    from sharecred.services.provisioner import Console, Provisioner, report

    with tempfile.TemporaryDirectory() as base_dir:
        settings = ProvisionSettings(base_dir=Path(base_dir), bcrypt_cost=4)
        console = Console(stream=io.StringIO("neo\n\n"))
        result = Provisioner(settings, console=console).run()
        report(result, console)

        hash_file = Path(base_dir) / "download" / "neo" / "hash.txt"
        if not hash_file.is_file():
            print(f"Missing hash file at {hash_file}")
            return False

        if not verify_password(result.password, hash_file.read_bytes()):
            print("Stored hash does not verify")
            return False

    print("Provisioning wrote a verifiable hash")
    return True


def main():
    """Run all tests."""
    print("Sharecred System Test")
    print("=" * 50)

    tests = [
        ("Validator", test_validator),
        ("Suggestion Generator", test_generator),
        ("Provisioning", test_provisioning),
    ]

    results = {}
    for test_name, test_func in tests:
        print(f"\n{test_name}")
        print("-" * 30)
        try:
            results[test_name] = test_func()
        except Exception as e:
            print(f"{test_name} failed with exception: {e}")
            results[test_name] = False

    print("\n" + "=" * 50)
    print("Test Summary")
    print("=" * 50)

    passed = sum(1 for result in results.values() if result)
    total = len(results)

    for test_name, result in results.items():
        status = "PASS" if result else "FAIL"
        print(f"{status} {test_name}")

    print(f"\nOverall: {passed}/{total} tests passed")

    if passed == total:
        print("All tests passed!")
        return 0

    print("Some tests failed. Check the output above.")
    return 1


if __name__ == "__main__":
    sys.exit(main())
