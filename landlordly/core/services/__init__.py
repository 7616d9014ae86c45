# landlordly - Core services (pure logic over ports)
