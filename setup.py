from setuptools import setup, find_packages

setup(
    name='pbirch',
    version='0.1',
    zip_safe=False,
    packages=find_packages(),
    package_data={
        'pbirch': ['data/csv/*.csv']
    },
    install_requires=[
        'SQLAlchemy>=1.4',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
    ]
)
