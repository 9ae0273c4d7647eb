"""Fixed file bodies emitted into every generated AVS project.

These payloads are opaque to the engine: they are written verbatim and never
rendered.  ``EMBEDDED_TEMPLATES`` holds the built-in fallback bodies used
when a bundled ``.j2`` template cannot be read.
"""

from __future__ import annotations

PACKAGE_JSON_TEMPLATE = '''\
{
  "name": {{ project_name|json_string }},
  "version": "0.1.0",
  "description": {{ description|json_string }},
  "scripts": {
    "compile": "hardhat compile",
    "test": "hardhat test",
    "deploy": "hardhat run scripts/deploy.ts"
  },
  "devDependencies": {
    "@nomicfoundation/hardhat-toolbox": "^4.0.0",
    "hardhat": "^2.19.4",
    "typescript": "^5.3.3"
  }
}
'''

EMBEDDED_TEMPLATES: dict[str, str] = {
    "package.json": PACKAGE_JSON_TEMPLATE,
}

HARDHAT_CONFIG = '''\
import { HardhatUserConfig } from "hardhat/config";
import "@nomicfoundation/hardhat-toolbox";

const config: HardhatUserConfig = {
  solidity: {
    version: "0.8.20",
    settings: {
      optimizer: {
        enabled: true,
        runs: 200,
      },
    },
  },
  networks: {
    hardhat: {
      chainId: 31337,
    },
    localhost: {
      url: "http://127.0.0.1:8545",
    },
  },
};

export default config;
'''

DEPLOY_SCRIPT = '''\
import { ethers } from "hardhat";

async function main() {
  const [deployer] = await ethers.getSigners();
  console.log("Deploying contracts with account:", deployer.address);

  const TaskMailbox = await ethers.getContractFactory("TaskMailbox");
  const mailbox = await TaskMailbox.deploy();
  await mailbox.waitForDeployment();
  console.log("TaskMailbox deployed to:", await mailbox.getAddress());

  const TaskAVSRegistrar = await ethers.getContractFactory("TaskAVSRegistrar");
  const delegationManager = process.env.DELEGATION_MANAGER || ethers.ZeroAddress;
  const registrar = await TaskAVSRegistrar.deploy(
    await mailbox.getAddress(),
    delegationManager
  );
  await registrar.waitForDeployment();
  console.log("TaskAVSRegistrar deployed to:", await registrar.getAddress());
}

main()
  .then(() => process.exit(0))
  .catch((error) => {
    console.error(error);
    process.exit(1);
  });
'''

TASK_MAILBOX_TEST = '''\
import { expect } from "chai";
import { ethers } from "hardhat";

describe("TaskMailbox", function () {
  it("Should submit a task", async function () {
    const TaskMailbox = await ethers.getContractFactory("TaskMailbox");
    const mailbox = await TaskMailbox.deploy();
    await mailbox.waitForDeployment();

    const taskData = ethers.toUtf8Bytes("test task");
    const tx = await mailbox.submitTask(taskData);
    const receipt = await tx.wait();

    expect(receipt).to.not.be.null;
  });
});
'''

AGGREGATOR_SOURCE = '''\
import { ethers } from 'ethers';

export class Aggregator {
  private provider: ethers.Provider;
  private contract: ethers.Contract;

  constructor(providerUrl: string, contractAddress: string, abi: any[]) {
    this.provider = new ethers.JsonRpcProvider(providerUrl);
    this.contract = new ethers.Contract(contractAddress, abi, this.provider);
  }

  async aggregateTask(taskId: bigint): Promise<void> {
    // Implement aggregation logic
    console.log(`Aggregating task ${taskId}`);
  }
}
'''

EXECUTOR_SOURCE = '''\
import { ethers } from 'ethers';

export class Executor {
  private provider: ethers.Provider;
  private wallet: ethers.Wallet;

  constructor(providerUrl: string, privateKey: string) {
    this.provider = new ethers.JsonRpcProvider(providerUrl);
    this.wallet = new ethers.Wallet(privateKey, this.provider);
  }

  async executeTask(taskData: string): Promise<string> {
    // Implement task execution logic
    console.log(`Executing task: ${taskData}`);
    return 'result';
  }
}
'''

OFF_CHAIN_VERSION = "0.1.0"

OFF_CHAIN_DEPENDENCIES: dict[str, str] = {
    "ethers": "^6.9.2",
    "dotenv": "^16.3.1",
}
