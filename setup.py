"""meeus_nutation Package setup file."""
# Third Party Imports
import setuptools

setuptools.setup(
    name="meeus_nutation",
    description="Earth nutation, obliquity of the ecliptic and equation of the equinoxes (Meeus)",
    version="1.0.0",
    packages=setuptools.find_packages("src"),
    package_dir={"": "src"},
    package_data={
        "meeus_nutation.common": [
            "default_behavior.config",
        ],
        "meeus_nutation.physics.data.nutation": [
            "*.dat",
        ],
    },
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.19",
    ],
    extras_require={
        "dev": [
            # Linting
            "ruff==0.1.1",
            "pylint==3.0.0",
            # Type Checking
            "mypy==1.6.0",
            "typing_extensions>=4.1.1",
            # Formatters
            "black==23.9.1",
            "isort[colors]==5.12.0",
            # Pre-commit stuff
            "pre-commit==3.5.0",
        ],
        "test": [
            "pytest>=7.4.2",
            "pytest-datafiles>=3.0.0",
            "pytest-randomly>=3.15.0",
            "coverage>=7.3.2",
            "pytest-cov>=4.1.0",
        ],
        "doc": [
            "sphinx>=6.1.3",
            "sphinx_rtd_theme>=1.2.0",
            "sphinxcontrib-bibtex>=2.5.0",
            "sphinx-gallery>=0.12.2",
            "matplotlib>=3.3",
        ],
    },
    entry_points={
        "console_scripts": [
            "meeus-nutation=meeus_nutation:main",
        ]
    },
    zip_safe=False,
)
