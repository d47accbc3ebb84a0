from setuptools import setup

# Metadata goes in setup.cfg. These are here for GitHub's dependency graph.
setup(
    name="url-sweatshirt",
    install_requires=[],
    extras_require={"tests": ["pytest", "hypothesis"]},
)
