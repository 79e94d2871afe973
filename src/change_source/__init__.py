"""Switch npm, yarn and pnpm registries and remember custom registry URLs."""
