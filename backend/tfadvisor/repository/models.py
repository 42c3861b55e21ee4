"""Repository models — patterns, best-practice articles, module-structure documents."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PatternCategory(str, Enum):
    COMPUTE = "compute"
    NETWORKING = "networking"
    STORAGE = "storage"
    DATABASE = "database"
    SECURITY = "security"
    APPLICATION = "application"
    MONITORING = "monitoring"


class CloudProvider(str, Enum):
    AWS = "aws"
    AZURE = "azure"
    GCP = "gcp"
    GENERIC = "generic"


class ComplexityLevel(str, Enum):
    BASIC = "basic"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Pattern(BaseModel):
    """A named, reusable configuration template."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    description: str = ""
    category: PatternCategory
    provider: CloudProvider
    complexity: ComplexityLevel
    files: dict[str, str] = Field(default_factory=dict)
    tags: list[str] = Field(default_factory=list)


class PatternFilter(BaseModel):
    """Lookup criteria. Every criterion given must hold; omitted ones match anything."""

    category: Optional[PatternCategory] = None
    provider: Optional[CloudProvider] = None
    complexity: Optional[ComplexityLevel] = None
    tags: list[str] = Field(default_factory=list)  # any one tag is enough
    query: Optional[str] = None

    def matches(self, pattern: Pattern) -> bool:
        if self.category is not None and pattern.category != self.category:
            return False
        if self.provider is not None and pattern.provider != self.provider:
            return False
        if self.complexity is not None and pattern.complexity != self.complexity:
            return False
        if self.tags:
            wanted = {t.lower() for t in self.tags}
            if not any(t.lower() in wanted for t in pattern.tags):
                return False
        if self.query:
            query = self.query.lower()
            haystacks = (pattern.name, pattern.description, pattern.id)
            if not any(query in h.lower() for h in haystacks):
                return False
        return True


class BestPracticeDoc(BaseModel):
    """A best-practice article, addressed as ``bestpractice:<category>/<id>``."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    title: str
    category: str = Field(..., min_length=1)
    description: str = ""
    content: str = ""
    provider: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    references: list[str] = Field(default_factory=list)

    @property
    def uri(self) -> str:
        return f"bestpractice:{self.category}/{self.id}"


class ModuleStructureFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    required: bool = False
    content: Optional[str] = None


class ModuleStructureDoc(BaseModel):
    """A recommended module layout, addressed as ``modulestructure:<provider|generic>/<type>``."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(..., min_length=1)
    description: str = ""
    files: list[ModuleStructureFile] = Field(default_factory=list)
    examples: list[str] = Field(default_factory=list)
    provider: Optional[str] = None
    references: list[str] = Field(default_factory=list)

    @property
    def uri(self) -> str:
        return f"modulestructure:{self.provider or 'generic'}/{self.type}"
