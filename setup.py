from setuptools import setup, find_packages

setup(
    name="countdown-timer",
    version="0.3.0",
    packages=find_packages(include=["countdown", "countdown.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "PyYAML",   # config.yaml
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "countdown=countdown.main:main"
        ]
    },
)
