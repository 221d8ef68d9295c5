"""Static template definitions.

Each entry declares the directory layout, sample documents, sidebar
groups and navbar entry of one documentation archetype.
"""

from specment.locales import Language
from specment.models import (
    ContentFile,
    DirectoryStructure,
    NavMapping,
    SidebarGroup,
    TemplateConfig,
    TemplateName,
)

EN = Language.EN
JA = Language.JA


# =============================================================================
# Sample content
# =============================================================================

CLASSIC_INTRO = """---
sidebar_position: 1
---

# {{projectName}}

Let's discover **Docusaurus in less than 5 minutes**.

## Getting Started

Get started by editing the documents under `docs/`.

### What you'll need

- [Node.js](https://nodejs.org/en/download/) version 20.0 or above:
  - When installing Node.js, you are recommended to check all checkboxes related to dependencies.
{{#search}}
## Search

Full-text search is enabled. Run a production build to generate the index.
{{/search}}
"""

ANALYSIS_INTRO = """---
sidebar_position: 1
---

# プロジェクト分析

このセクションでは、{{projectName}} の詳細な分析を行います。

## 分析の目的

- プロジェクトの現状把握
- 課題の特定
- 改善点の洗い出し

## 分析手法

### SWOT分析

#### Strengths (強み)
-

#### Weaknesses (弱み)
-

#### Opportunities (機会)
-

#### Threats (脅威)
-
{{#plantuml}}
## 関係図

```plantuml
@startuml
actor User
rectangle "{{projectName}}" {
  usecase "分析対象"
}
User --> "分析対象"
@enduml
```
{{/plantuml}}
"""

REQUIREMENTS_INTRO = """---
sidebar_position: 1
---

# 機能要件

このセクションでは、{{projectName}} が提供すべき機能について定義します。

## 要件の記述方法

要件はEARS（Easy Approach to Requirements Syntax）フォーマットに従って記述します。

### 基本パターン

- **THE [システム] SHALL [動作]** - 常時要件
- **WHEN [トリガー], THE [システム] SHALL [応答]** - イベント駆動
- **WHILE [条件], THE [システム] SHALL [応答]** - 状態駆動
- **IF [条件], THEN THE [システム] SHALL [応答]** - 望ましくない事象

## 機能要件一覧

### FR-001: ユーザー認証

**User Story:** ユーザーとして、システムに安全にログインしたい

#### Acceptance Criteria

1. WHEN ユーザーが有効な認証情報を入力する時、THE システム SHALL ユーザーをログインさせる
2. WHEN ユーザーが無効な認証情報を入力する時、THE システム SHALL エラーメッセージを表示する
3. WHILE ユーザーがログイン中、THE システム SHALL セッションを維持する
{{#mermaid}}
## ログインフロー

```mermaid
sequenceDiagram
  User->>System: 認証情報
  System-->>User: セッション
```
{{/mermaid}}
"""

NON_FUNCTIONAL_INTRO = """---
sidebar_position: 1
---

# 非機能要件

性能・可用性・セキュリティなど、{{projectName}} の品質特性を定義します。

| ID | 区分 | 要件 |
|----|------|------|
| NFR-001 | 性能 | |
| NFR-002 | 可用性 | |
| NFR-003 | セキュリティ | |
"""

EXTERNAL_INTRO = """---
sidebar_position: 1
---

# システムアーキテクチャ

このセクションでは、{{projectName}} の全体的なアーキテクチャについて説明します。

## アーキテクチャ概要

システムは以下の主要コンポーネントで構成されます：
{{#plantuml}}
```plantuml
@startuml
!theme plain

package "Frontend" {
  [Web Application]
  [Mobile App]
}

package "Backend" {
  [API Gateway]
  [Application Server]
  [Database]
}

[Web Application] --> [API Gateway]
[Mobile App] --> [API Gateway]
[API Gateway] --> [Application Server]
[Application Server] --> [Database]

@enduml
```
{{/plantuml}}
## 設計原則

1. **スケーラビリティ**: システムは負荷に応じて拡張可能
2. **可用性**: 99.9%以上の稼働率を維持
3. **セキュリティ**: 多層防御によるセキュリティ確保
"""

INTERNAL_INTRO = """---
sidebar_position: 1
---

# 実装詳細

このセクションでは、{{projectName}} の内部実装について詳細に説明します。

## モジュール構成

システムは以下のモジュールで構成されます：
{{#plantuml}}
```plantuml
@startuml
!theme plain

package "Core Module" {
  class CoreService {
    +initialize()
    +process()
    +cleanup()
  }
}

package "Data Module" {
  class DataRepository {
    +save()
    +find()
    +update()
    +delete()
  }
}

CoreService --> DataRepository

@enduml
```
{{/plantuml}}
## 実装ガイドライン

1. **コーディング規約**: プロジェクトのLintルールに従う
2. **テスト**: 単体テスト・統合テストを必須とする
3. **ドキュメント**: 公開APIには必ず説明を付ける
"""

API_INTRO = """---
sidebar_position: 1
---

# API Overview

This section describes the public API of {{projectName}}.
{{#redoc}}
The full OpenAPI reference is rendered at [/api/](/api/) from `static/openapi.yaml`.
{{/redoc}}
## Conventions

- All endpoints return JSON.
- Errors use the `Error` schema with `code` and `message` fields.
"""


# =============================================================================
# Registry
# =============================================================================

TEMPLATE_DEFINITIONS = {
    TemplateName.CLASSIC_SPEC: TemplateConfig(
        name=TemplateName.CLASSIC_SPEC,
        display_name={EN: "Classic Specification", JA: "汎用仕様書"},
        description={
            EN: "General-purpose specification template with a basic document structure",
            JA: "汎用的な仕様書テンプレート。基本的なドキュメント構造を提供します",
        },
        features=("search", "plantuml", "mermaid", "i18n"),
        title="Classic Specification Documentation",
        tagline="Classic Specification Documentation",
        directory_structure=DirectoryStructure(
            docs=("tutorial-basics", "tutorial-extras"),
            static=("img",),
            src=("css", "components"),
        ),
        sample_content=(
            ContentFile("docs/intro.md", CLASSIC_INTRO),
        ),
        default_features=("search",),
        sidebars=(
            SidebarGroup("tutorialSidebar", {EN: "Documentation", JA: "ドキュメント"}, "."),
        ),
    ),
    TemplateName.PROJECT_ANALYSIS: TemplateConfig(
        name=TemplateName.PROJECT_ANALYSIS,
        display_name={EN: "Project Analysis", JA: "プロジェクト概要・分析"},
        description={
            EN: "Template for project overview and analysis",
            JA: "プロジェクトの全体像を把握するための構造を提供します",
        },
        features=("search", "plantuml", "mermaid"),
        title="Project Analysis & Overview Documentation",
        tagline="Project Analysis & Overview Documentation",
        directory_structure=DirectoryStructure(
            docs=("analysis", "overview", "stakeholders"),
            static=("img", "diagrams"),
        ),
        sample_content=(
            ContentFile("docs/analysis/intro.md", ANALYSIS_INTRO),
        ),
        default_features=("plantuml",),
        sidebars=(
            SidebarGroup("analysisSidebar", {EN: "Project Analysis", JA: "プロジェクト分析"}, "analysis"),
            SidebarGroup("overviewSidebar", {EN: "Project Overview", JA: "プロジェクト概要"}, "overview"),
        ),
        nav=NavMapping({EN: "Project Analysis", JA: "プロジェクト概要・分析"}, "analysis/intro"),
    ),
    TemplateName.REQUIREMENTS: TemplateConfig(
        name=TemplateName.REQUIREMENTS,
        display_name={EN: "Requirements Specification", JA: "要件定義"},
        description={
            EN: "Template for requirements specification",
            JA: "機能要件・非機能要件を体系的に整理できます",
        },
        features=("search", "mermaid", "i18n"),
        title="Requirements Specification Documentation",
        tagline="Requirements Specification Documentation",
        directory_structure=DirectoryStructure(
            docs=("functional", "non-functional", "use-cases"),
            static=("img", "diagrams"),
        ),
        sample_content=(
            ContentFile("docs/functional/intro.md", REQUIREMENTS_INTRO),
            ContentFile("docs/non-functional/intro.md", NON_FUNCTIONAL_INTRO),
        ),
        default_features=("search",),
        sidebars=(
            SidebarGroup("functionalSidebar", {EN: "Functional Requirements", JA: "機能要件"}, "functional"),
            SidebarGroup(
                "nonFunctionalSidebar",
                {EN: "Non-functional Requirements", JA: "非機能要件"},
                "non-functional",
            ),
            SidebarGroup("useCasesSidebar", {EN: "Use Cases", JA: "ユースケース"}, "use-cases"),
        ),
        nav=NavMapping({EN: "Requirements", JA: "要件定義"}, "functional/intro"),
    ),
    TemplateName.EXTERNAL_DESIGN: TemplateConfig(
        name=TemplateName.EXTERNAL_DESIGN,
        display_name={EN: "External Design", JA: "外部設計"},
        description={
            EN: "Template for external design specification",
            JA: "システム外部とのインターフェース設計に特化しています",
        },
        features=("search", "plantuml", "mermaid", "redoc"),
        title="External Design Specification Documentation",
        tagline="External Design Specification Documentation",
        directory_structure=DirectoryStructure(
            docs=("architecture", "api", "ui"),
            static=("img", "diagrams", "api-specs"),
        ),
        sample_content=(
            ContentFile("docs/architecture/intro.md", EXTERNAL_INTRO),
        ),
        default_features=("plantuml", "redoc"),
        sidebars=(
            SidebarGroup("architectureSidebar", {EN: "System Architecture", JA: "システムアーキテクチャ"}, "architecture"),
            SidebarGroup("apiSidebar", {EN: "API Design", JA: "API設計"}, "api"),
            SidebarGroup("uiSidebar", {EN: "UI/UX Design", JA: "UI/UX設計"}, "ui"),
        ),
        nav=NavMapping({EN: "External Design", JA: "外部設計"}, "architecture/intro"),
    ),
    TemplateName.INTERNAL_DESIGN: TemplateConfig(
        name=TemplateName.INTERNAL_DESIGN,
        display_name={EN: "Internal Design", JA: "内部設計"},
        description={
            EN: "Template for internal design specification",
            JA: "システム内部の詳細設計とアルゴリズムに特化しています",
        },
        features=("search", "plantuml", "mermaid"),
        title="Internal Design Specification Documentation",
        tagline="Internal Design Specification Documentation",
        directory_structure=DirectoryStructure(
            docs=("implementation", "database", "algorithms"),
            static=("img", "diagrams"),
        ),
        sample_content=(
            ContentFile("docs/implementation/intro.md", INTERNAL_INTRO),
        ),
        default_features=("plantuml",),
        sidebars=(
            SidebarGroup("implementationSidebar", {EN: "Implementation", JA: "実装詳細"}, "implementation"),
            SidebarGroup("databaseSidebar", {EN: "Database Design", JA: "データベース設計"}, "database"),
            SidebarGroup("algorithmSidebar", {EN: "Algorithms", JA: "アルゴリズム"}, "algorithms"),
        ),
        nav=NavMapping({EN: "Internal Design", JA: "内部設計"}, "implementation/intro"),
    ),
    TemplateName.API_SPEC: TemplateConfig(
        name=TemplateName.API_SPEC,
        display_name={EN: "API (Redocusaurus)", JA: "API (Redocusaurus使用)"},
        description={
            EN: "Template for API specification with Redocusaurus",
            JA: "RESTful APIの詳細な仕様を記述できます",
        },
        features=("search", "redoc", "mermaid"),
        title="API Specification Documentation",
        tagline="API Specification Documentation",
        directory_structure=DirectoryStructure(
            docs=("api", "guides"),
            static=("img",),
        ),
        sample_content=(
            ContentFile("docs/api/intro.md", API_INTRO),
        ),
        default_features=("redoc",),
        sidebars=(
            SidebarGroup("apiSidebar", {EN: "API", JA: "API"}, "api"),
            SidebarGroup("guidesSidebar", {EN: "Guides", JA: "ガイド"}, "guides"),
        ),
        auto_enabled_features=("redoc",),
    ),
}
