[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vpnlist_updater"
version = "0.1.0"
description = "Download OpenVPN profiles listed on a web page, filtered by protocol"
requires-python = ">=3.10"
keywords = ["openvpn", "vpn", "profiles", "downloader"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Utilities",
]
dependencies = [
    "httpx>=0.24",
    "pyyaml>=6.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "pytest-asyncio>=0.21",
]

[project.scripts]
vpnlist-updater = "vpnlist_updater.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["vpnlist_updater"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
