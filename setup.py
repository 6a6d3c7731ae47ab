import re
from pathlib import Path
from typing import List

from setuptools import setup, find_packages

ROOT = Path(__file__).resolve().parent


def read_requirements(filename: str) -> List[str]:
    lines = (ROOT / filename).read_text(encoding="utf-8").splitlines()
    return [line.strip() for line in lines if line.strip() and not line.startswith("#")]


def get_version():
    file = ROOT / "voice_relay_bot" / "__init__.py"
    return re.search(
        r'^__version__ *= *[\'"]([^\'"]*)[\'"]', file.read_text(encoding="utf-8"), re.M
    )[1]


setup(
    name="voice_relay_bot",
    version=get_version(),
    description="Telegram webhook relay that classifies updates for voice transcription",
    zip_safe=False,
    python_requires=">=3.10",
    packages=find_packages(exclude=["tests", "tests.*", "scripts"]),
    install_requires=read_requirements("requirements.txt"),
    extras_require={"test": read_requirements("requirements-test.txt")},
    entry_points={
        "console_scripts": ["voice-relay-bot=voice_relay_bot.__main__:main"],
    },
)
