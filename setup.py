from setuptools import find_packages, setup


install_requires = [
    "coloredlogs",
    "isodate",
    "jsonschema",
    "opentelemetry-api",
    "opentelemetry-exporter-prometheus",
    "opentelemetry-sdk",
    "prometheus-client",
    "pytz",
    "pyyaml",
]


setup(
    name="zfssnap",
    description="zfssnap manages ZFS snapshots through the zfs command line tool",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "zfssnap.definition.schema": ["*.yaml"],
    },
    include_package_data=True,
    license="BSD",
    platforms="any",
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Environment :: Console",
        "Environment :: No Input/Output (Daemon)",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: BSD License",
        "Operating System :: POSIX",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3 :: Only",
        "Topic :: System :: Filesystems",
    ],
    python_requires=">=3.8",
    install_requires=install_requires,
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "zfssnap = zfssnap.main:main",
        ],
    },
)
