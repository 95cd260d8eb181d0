#!/usr/bin/env python3
"""
Environment and Provider Diagnostics Script

This script prints the runtime configuration for the completion provider and
the file storage. Use this to verify that:
1. LLM provider is one the agent manager can route to
2. The credential it needs is present
3. Storage coordinates are set for the parse-resume endpoint

Usage:
    python scripts/inspect_env.py
"""

import sys


def main():
    print("=" * 60)
    print("Resume Keyword Analyzer Diagnostics")
    print("=" * 60)

    from resume_analyzer.core.config import settings

    print("\n📋 ENVIRONMENT VARIABLES (from .env)")
    print("-" * 40)

    print("\n🤖 LLM Configuration:")
    print(f"  LLM_PROVIDER:     {settings.LLM_PROVIDER}")
    print(f"  LL_MODEL:         {settings.LL_MODEL}")
    print(f"  LLM_BASE_URL:     {settings.LLM_BASE_URL or '(provider default)'}")
    print(f"  LLM_TIMEOUT:      {settings.LLM_TIMEOUT}")
    print(f"  LLM_API_KEY:      {'✅ Set' if settings.LLM_API_KEY else '❌ NOT SET'}")

    print("\n🗄️  Storage Configuration:")
    print(f"  SUPABASE_URL:              {settings.SUPABASE_URL or '(not set)'}")
    print(f"  SUPABASE_SERVICE_ROLE_KEY: {'Set' if settings.SUPABASE_SERVICE_ROLE_KEY else '(not set)'}")
    print(f"  STORAGE_BUCKET:            {settings.STORAGE_BUCKET}")

    print("\n✅ VALIDATION CHECKS")
    print("-" * 40)

    errors = []
    warnings = []

    provider = (settings.LLM_PROVIDER or "gateway").strip()
    if provider == "gateway":
        print("✅ LLM Provider: OpenAI-compatible gateway")
        if not settings.LLM_API_KEY:
            errors.append("LLM_API_KEY must be set for the gateway provider")
    elif provider == "ollama":
        print("✅ LLM Provider: local Ollama")
    elif provider.startswith("llama_index."):
        print(f"✅ LLM Provider: LlamaIndex class {provider}")
        if not settings.LLM_API_KEY:
            errors.append("LLM_API_KEY must be set for LlamaIndex providers")
    else:
        print(f"❌ LLM Provider: unrecognised value {provider}")
        errors.append("LLM_PROVIDER must be 'gateway', 'ollama' or a llama_index.* class path")

    if not settings.SUPABASE_URL or not settings.SUPABASE_SERVICE_ROLE_KEY:
        warnings.append("Storage not configured; /api/v1/parse-resume will fail")

    print("\n🔧 RUNTIME INSTANTIATION TEST")
    print("-" * 40)

    try:
        import asyncio
        from resume_analyzer.agent.manager import AgentManager

        mgr = AgentManager(strategy="lines")
        instance = asyncio.run(mgr._get_provider())
        print(f"✅ AgentManager instantiated {type(instance).__name__}")
    except Exception as e:
        print(f"❌ Failed to instantiate provider: {e}")
        errors.append(f"Provider instantiation failed: {e}")

    print("\n" + "=" * 60)
    if errors:
        print("❌ ERRORS FOUND:")
        for err in errors:
            print(f"   • {err}")
        print("\nFix these issues before running the application.")
        sys.exit(1)
    elif warnings:
        print("⚠️  WARNINGS (non-critical):")
        for warn in warnings:
            print(f"   • {warn}")
        print("\n✅ Keyword analysis will work, but consider addressing warnings.")
        sys.exit(0)
    else:
        print("✅ ALL CHECKS PASSED")
        sys.exit(0)


if __name__ == "__main__":
    main()
