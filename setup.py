#!/usr/bin/env python3
"""
sim-measures 项目安装脚本
用于PyPI发布和pip安装
"""

from setuptools import setup, find_packages

# 读取README文件
def read_readme():
    with open("README.md", "r", encoding="utf-8") as fh:
        return fh.read()

# 读取requirements.txt
def read_requirements():
    with open("requirements.txt", "r", encoding="utf-8") as fh:
        return [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="sim-measures",
    version="0.1.0",
    author="Your Name",
    author_email="your.email@example.com",
    description="字符串与token序列相似度度量（Jaccard 集合/多重集、Levenshtein / Damerau-Levenshtein）",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/sim-measures",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Text Processing :: Linguistic",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=read_requirements(),
    extras_require={
        "dev": [
            "ruff>=0.5",
            "mypy>=1.8",
            "pytest>=8",
            "rapidfuzz>=3.0",
            "types-PyYAML",
            "types-tqdm",
            "pandas-stubs",
        ],
        "test": [
            "pytest>=8",
            "rapidfuzz>=3.0",
        ],
        "parquet": [
            "pyarrow>=14",
        ],
    },
    entry_points={
        "console_scripts": [
            "sim-measures=sim_measures.cli:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
    keywords="similarity, jaccard, levenshtein, damerau, edit distance, tokenizer",
)
