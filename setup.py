from setuptools import setup

__version__ = "0.1.0"

INSTALL_REQUIREMENTS = ["torch"]
EXTRAS_REQUIRE = {
    "demo": ["configargparse", "tqdm"],
    "test": ["pytest"],
}

setup(
    name="moore_neighborhood",
    version=__version__,
    description="Moore neighborhood offsets for grids of any dimension and range",
    long_description="",
    install_requires=INSTALL_REQUIREMENTS,
    extras_require=EXTRAS_REQUIRE,
    packages=["moore_neighborhood"],  # Directory name
    zip_safe=False,
)
