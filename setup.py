import re
import sys

from setuptools import find_packages, setup


def read_version() -> str:
    with open("teamkeys/__init__.py") as inf:
        match = re.search(r'^__version__ = "([^"]+)"', inf.read(), re.MULTILINE)

    if match is None:
        raise ValueError("unable to find __version__ in teamkeys/__init__.py")

    return match.group(1)


def main():
    if sys.version_info[:2] < (3, 10):
        print("ERROR: teamkeys requires python 3.10+")
        print("This python is:")
        print(sys.version)
        return 86

    setup(
        author="teamkeys developers",
        description="Sync GitHub organization team SSH keys into authorized_keys",
        entry_points={"console_scripts": ["teamkeys = teamkeys.__main__:main"]},
        extras_require={"test": ["pytest"]},
        install_requires=[
            "aws-lambda-powertools",
            "oauthlib",
            "requests",
            "requests-oauthlib",
        ],
        license="MIT",
        name="teamkeys",
        packages=find_packages(exclude=["tests", "tests.*"]),
        python_requires=">=3.10,<4",
        version=read_version(),
        zip_safe=True,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
