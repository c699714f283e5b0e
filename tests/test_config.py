from linux_fingerprint.config import Settings

def test_unrelated_env_file_keys_are_ignored(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("DATABASE_URL=postgres://x\nSECRET_KEY=abc\n")

    config = Settings(_env_file=str(env_file))

    assert config.DOCKER_BINARY == "docker"
    assert config.PROBE_TIMEOUT_SECONDS == 2.0

def test_prefixed_env_file_keys_are_applied(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("DATABASE_URL=postgres://x\nFINGERPRINT_DOCKER_BINARY=/opt/docker/bin/docker\n")

    config = Settings(_env_file=str(env_file))

    assert config.DOCKER_BINARY == "/opt/docker/bin/docker"

def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("FINGERPRINT_PROBE_TIMEOUT_SECONDS", "0.5")

    assert Settings(_env_file=None).PROBE_TIMEOUT_SECONDS == 0.5
