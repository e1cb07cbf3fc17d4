"""
pkg-infra

Add testing, IDE, vignette, native-code and CI infrastructure to R source
packages, keeping DESCRIPTION's dependency fields in step.
"""

__version__ = "0.1.0"

from pkg_infra.scaffolding import (
    ScaffoldFeature,
    ScaffoldOperation,
    use_knitr,
    use_rcpp,
    use_rstudio,
    use_testthat,
    use_travis,
)

__all__ = [
    "ScaffoldFeature",
    "ScaffoldOperation",
    "use_knitr",
    "use_rcpp",
    "use_rstudio",
    "use_testthat",
    "use_travis",
]
