#setup.py
import os
from setuptools import setup, find_packages

requirements = []
with open(os.path.dirname(os.path.abspath(__file__)) + "/requirements.txt", "r") as R:
    for line in R:
        package = line.strip()
        if package:
            requirements.append(package)

setup(
    name="NLP_DepNode",
    version='0.1.0',
    description="Dependency tree nodes with head/dependent navigation and semantic arcs",
    author="toast",
    packages=find_packages(exclude=['tests']),
    install_requires=requirements,
    extras_require={
        'test': ['pytest>=7.0'],
    },
    package_data={'NLP_DepNode': ['configs/*.yaml']},
    include_package_data=True,
    zip_safe=False,
)
