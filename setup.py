from setuptools import setup, find_packages

setup(
    name="macfe80",
    version="0.1.0",
    author="",
    author_email="",
    description="MAC to EUI-64 and IPv6 link-local conversion",
    license="",
    packages=find_packages(exclude=["tests"]),
    include_package_data=True,
    zip_safe=False,
    python_requires=">=3.8",
    install_requires=["Flask", "PyYAML", "voluptuous", "waitress"],
    extras_require={"test": ["mock", "pytest"]},
    setup_requires=["wheel"],
    entry_points={
        "console_scripts": [
            "macfe80=macfe80.service.app:main",
        ],
    },
)
