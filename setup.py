from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="isoidentity",
    version="0.0.1",
    author="Peter Cotton",
    author_email="",
    description="ISO-3166 country and subdivision resolution",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/petercotton/isoidentity",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={
        'isoidentity': [
            'dataset/data/*.yaml',
            'dataset/data/*.json',
            'countries/data/*.yaml',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
    install_requires=[
        "pandas>=1.3.0",
        "pycountry>=22.3.5",
        "pyyaml>=5.4",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
)
