from __future__ import annotations

import datetime as dt
import json

import pytest
from click.testing import CliRunner
from cryptography import x509
from cryptography.hazmat.primitives import hashes as crypto_hashes
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.x509.oid import NameOID

from rampart.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def _invoke(runner: CliRunner, *args: str):
    return runner.invoke(cli, list(args), obj={})


def test_compliant_exit_code(runner):
    result = _invoke(runner, "-q", "symmetric", "aes128", "--year", "2023")
    assert result.exit_code == 0, result.output


def test_non_compliant_exit_code(runner):
    result = _invoke(runner, "-q", "symmetric", "des-ede", "--year", "2023")
    assert result.exit_code == 1


def test_json_output(runner):
    result = _invoke(runner, "-o", "json", "hash", "sha3-256", "--year", "2023")
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["summary"]["compliant"] is True
    assert data["metadata"]["assessments"][0]["primitive"] == "sha3-256"


def test_json_pre_image(runner):
    result = _invoke(runner, "-o", "json", "hash", "sha256", "-u", "pre-image", "--year", "2023")
    assert result.exit_code == 0
    assessment = json.loads(result.output)["metadata"]["assessments"][0]
    assert assessment["family"] == "hash_based"
    assert assessment["recommendation"] == "sha256"

    result = _invoke(runner, "-o", "json", "hash", "sha1", "-u", "pre-image", "--year", "2023")
    assert result.exit_code == 1
    assert json.loads(result.output)["metadata"]["assessments"][0]["recommendation"] == "sha224"


def test_standard_option(runner):
    result = _invoke(runner, "-o", "json", "ecc", "prime256v1", "-s", "CNSA", "--year", "2023")
    assert result.exit_code == 1
    assessment = json.loads(result.output)["metadata"]["assessments"][0]
    assert assessment["standard"] == "cnsa"
    assert assessment["recommendation"] == "secp384r1"


def test_standards_listing(runner):
    result = _invoke(runner, "-o", "json", "standards")
    assert result.exit_code == 0
    names = [s["name"] for s in json.loads(result.output)]
    assert names == ["nist", "bsi", "cnsa", "ecrypt", "lenstra", "testing"]


def test_standards_table(runner):
    result = _invoke(runner, "standards")
    assert result.exit_code == 0
    assert "lenstra" in result.output


def test_primitives_listing(runner):
    result = _invoke(runner, "-o", "json", "primitives", "hash")
    assert result.exit_code == 0
    assert "sha256" in json.loads(result.output)


def test_ffc_usage_error(runner):
    result = _invoke(runner, "-q", "ffc", "1024", "2048")
    assert result.exit_code == 2
    assert "Error" in result.output


def test_invalid_security(runner):
    result = _invoke(runner, "-q", "ifc", "2048", "--security", "0")
    assert result.exit_code == 2


def test_html_report(runner, tmp_path):
    report = tmp_path / "report.html"
    result = _invoke(runner, "-o", "html", "-f", str(report), "ifc", "4096", "--year", "2023")
    assert result.exit_code == 0, result.output
    assert "RSA-4096" in report.read_text(encoding="utf-8")


def test_x509(runner, tmp_path):
    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, "cli.test")])
    now = dt.datetime.now(dt.timezone.utc)
    cert = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - dt.timedelta(days=1))
        .not_valid_after(now + dt.timedelta(days=1))
        .sign(key, crypto_hashes.SHA256())
    )
    path = tmp_path / "cli.pem"
    path.write_bytes(cert.public_bytes(serialization.Encoding.PEM))

    result = _invoke(runner, "-o", "json", "x509", str(path), "--year", "2023")
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["metadata"]["subject"] == "CN=cli.test"
    assert [a["family"] for a in data["metadata"]["assessments"]] == ["ifc", "hash"]

    result = _invoke(runner, "-o", "json", "x509", str(path), "-s", "cnsa", "--year", "2023")
    assert result.exit_code == 1
