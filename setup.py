import setuptools

setuptools.setup(
    name="sxbootdat",
    version="1.0.0",
    author="The sxbootdat committers",
    description=("boot.dat generator for the SX Pro loader"),
    license="Apache Software License",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    python_requires='>=3.7',
    install_requires=[
        'cryptography>=2.6',
        'intelhex>=2.2.1',
        'click',
        'pyyaml>=5.1',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        "console_scripts": ["sxbootdat=sxbootdat.main:sxbootdat"]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Development Status :: 4 - Beta",
        "Topic :: Software Development :: Build Tools",
        "License :: OSI Approved :: Apache Software License",
    ],
)
