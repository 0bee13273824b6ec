from setuptools import setup, find_packages

setup(
    name="dietician",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    entry_points={
        'console_scripts': [
            'dietician=dietician.cli:main',
        ],
    },
    install_requires=[
        "pyelftools>=0.29",
        "cxxfilt>=0.3.0",
        "rust-demangler>=1.0",
    ],
    extras_require={
        'test': [
            "pytest>=7.0",
        ],
    },
    python_requires=">=3.8",
    author="dietician",
    description="Size breakdown of ELF executables by section and symbol purpose",
)
