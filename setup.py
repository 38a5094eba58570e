# DEPENDENCIES
from setuptools import setup
from setuptools import find_packages


# Read the long description from README.md if it exists

readme_path = "README.md"

try:
    with open(readme_path, "r", encoding="utf-8") as fh:
        long_description = fh.read()

except FileNotFoundError:
    long_description = "Offline heuristic analysis of legal documents"

setup(name                          = "legal-document-analyzer",
      version                       = "1.0.0",
      description                   = "Plain-language summaries, clause detection and risk scoring for legal documents.",
      long_description              = long_description,
      long_description_content_type = "text/markdown",
      packages                      = find_packages(exclude = ["tests", "tests.*"]),
      classifiers                   = ["Development Status :: 4 - Beta",
                                       "Intended Audience :: Legal Industry",
                                       "Operating System :: OS Independent",
                                       "Programming Language :: Python :: 3",
                                       "Programming Language :: Python :: 3.10",
                                       "Programming Language :: Python :: 3.11",
                                      ],
      python_requires               = ">=3.10",
      install_requires              = ["pydantic>=2.5.0",
                                       "pydantic-settings>=2.1.0",
                                      ],
      extras_require                = {"dev"  : ["black>=23.10.0", "isort>=5.12.0", "flake8>=6.0.0", "pytest>=7.4.0"],
                                       "test" : ["pytest>=7.4.0"],
                                      },
      include_package_data          = True,
     )
